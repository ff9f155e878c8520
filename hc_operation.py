# hc_operation.py - v 1.0.0 2025.10.19
#  
#  Copyright (c) 2025 Kanbara Tomonori
#  All rights reserved.
#  
#  x https://x.com/tomo1230
#  
#  This source code is proprietary and confidential.
#  Unauthorized copying, modification, distribution, or use is strictly prohibited.
#  
#  Author: Kanbara Tomonori
# 

import logging
import traceback
from contextlib import contextmanager

import adsk.fusion

logger = logging.getLogger('hello_cube.operation')


def _has_timeline(design) -> bool:
    return design.designType != adsk.fusion.DesignTypes.DirectDesignType

def _rollback_timeline(timeline, marker: int):
    if marker >= timeline.count: return
    timeline.item(marker).rollTo(True)
    timeline.deleteAllAfterMarker()
    timeline.moveToEnd()

def _group_timeline(timeline, marker: int, name: str):
    last = timeline.count - 1
    if last <= marker: return None
    group = timeline.timelineGroups.add(marker, last)
    group.name = name
    return group

@contextmanager
def undoable_operation(design, name: str, transparent: bool=False, args=None):
    """
    Scope a named edit of `design` that commits or rolls back as one unit.

    On success the timeline entries made inside the block are gathered into a
    group called `name`, unless `transparent` is set, in which case they stay
    inline next to the neighbouring features. On failure the command behind
    `args` is marked failed so Fusion aborts its transaction; without `args`
    the timeline is rolled back to where the block started. The exception is
    always re-raised.
    """
    timeline = design.timeline if _has_timeline(design) else None
    marker = timeline.markerPosition if timeline else 0
    logger.debug(f"Begin operation '{name}' at timeline marker {marker}")
    try:
        yield
    except Exception as e:
        logger.error(f"Operation '{name}' failed, rolling back:\n{traceback.format_exc()}")
        if args is not None:
            args.executeFailed = True
            args.executeFailedMessage = f"{name} failed: {e}"
        elif timeline:
            _rollback_timeline(timeline, marker)
        raise
    if timeline and not transparent:
        _group_timeline(timeline, marker, name)
    logger.debug(f"Committed operation '{name}'")
