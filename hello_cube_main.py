# hello_cube_main.py - v 1.0.0 2025.10.19
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

import adsk.core, adsk.fusion, traceback
import logging

import hc_context as ctx
import hc_geometry as geometry
import hc_load_guard as load_guard
from hc_operation import undoable_operation
from hc_platform import get_system

logger = logging.getLogger('hello_cube.main')

# --- Settings ---
CMD_ID = 'HelloCube_CreateCube'
CMD_NAME = 'Create Cube Example'
CMD_TOOLTIP = 'Creates a 1 m cube at the origin.'
OPERATION_NAME = 'Create Cube'
WORKSPACE_ID = 'FusionSolidEnvironment'
MENU_ID = 'PluginsPanel'
MENU_NAME = 'Plugins'
MENU_POSITION_ID = 'SolidScriptsAddinsPanel'

# --- Globals ---
_handlers = []
_cmd_def = None
_menu = None
_system = None


def create_cube(args=None):
    """Add a group holding a 1 m cube to the active design. Returns the new occurrence."""
    design = ctx.active_design()
    with undoable_operation(design, OPERATION_NAME, transparent=True, args=args):
        group = design.activeComponent.occurrences.addNewComponent(adsk.core.Matrix3D.create())
        entities = group.component
        sketch = entities.sketches.add(entities.xYConstructionPlane)
        points = [adsk.core.Point3D.create(*geometry.to_internal_point(p)) for p in geometry.CUBE_POINTS]
        lines = sketch.sketchCurves.sketchLines
        first = lines.addByTwoPoints(points[0], points[1])
        last = first
        for pt in points[2:]:
            last = lines.addByTwoPoints(last.endSketchPoint, pt)
        lines.addByTwoPoints(last.endSketchPoint, first.startSketchPoint)
        face = sketch.profiles.item(0)
        pushpull(entities, face, geometry.to_internal(geometry.PUSHPULL_DISTANCE))
        sketch.isVisible = False
    logger.debug(f"Created cube, bounds (m): {geometry.pushpull_bounds(geometry.CUBE_POINTS, geometry.PUSHPULL_DISTANCE)}")
    return group

def pushpull(component, profile, distance_cm: float):
    """Extrude `profile` into a new body; negative distances go against the sketch normal."""
    extrudes = component.features.extrudeFeatures
    ext_input = extrudes.createInput(profile, adsk.fusion.FeatureOperations.NewBodyFeatureOperation)
    distance = adsk.core.ValueInput.createByReal(abs(distance_cm))
    if distance_cm >= 0:
        ext_input.setDistanceExtent(False, distance)
    else:
        extent_definition = adsk.fusion.DistanceExtentDefinition.create(distance)
        ext_input.setOneSideExtent(extent_definition, adsk.fusion.ExtentDirections.NegativeExtentDirection)
    return extrudes.add(ext_input).bodies.item(0)

# --- Event handlers ---
class CreateCubeCreatedHandler(adsk.core.CommandCreatedEventHandler):
    def __init__(self): super().__init__()
    def notify(self, args):
        try:
            on_execute = CreateCubeExecuteHandler()
            args.command.execute.add(on_execute)
            _handlers.append(on_execute)
        except Exception:
            logger.error(traceback.format_exc())
            ctx.message_box(f'Failed to create the command:\n{traceback.format_exc()}')

class CreateCubeExecuteHandler(adsk.core.CommandEventHandler):
    def __init__(self): super().__init__()
    def notify(self, args):
        try:
            create_cube(args)
        except Exception:
            logger.error(traceback.format_exc())
            ctx.message_box(f'{OPERATION_NAME} failed:\n{traceback.format_exc()}')

# --- Menu ---
def install_menu(ui):
    """Get or create the Plugins panel and add the Create Cube Example button to it once."""
    global _cmd_def, _menu
    ws = ui.workspaces.itemById(WORKSPACE_ID)
    if not ws:
        raise RuntimeError(f"Workspace '{WORKSPACE_ID}' is not available.")
    _menu = ws.toolbarPanels.itemById(MENU_ID)
    if not _menu: _menu = ws.toolbarPanels.add(MENU_ID, MENU_NAME, MENU_POSITION_ID, False)
    _cmd_def = ui.commandDefinitions.itemById(CMD_ID)
    if not _cmd_def: _cmd_def = ui.commandDefinitions.addButtonDefinition(CMD_ID, CMD_NAME, CMD_TOOLTIP)
    if not any(isinstance(h, CreateCubeCreatedHandler) for h in _handlers):
        on_created = CreateCubeCreatedHandler()
        _cmd_def.commandCreated.add(on_created)
        _handlers.append(on_created)
    control = _menu.controls.itemById(CMD_ID)
    if not control: control = _menu.controls.addCommand(_cmd_def)
    logger.info(f"Installed '{CMD_NAME}' in the {MENU_NAME} menu")
    return control

def remove_menu():
    global _cmd_def, _menu
    if _menu:
        control = _menu.controls.itemById(CMD_ID)
        if control: control.deleteMe()
        if _menu.controls.count == 0: _menu.deleteMe()
    if _cmd_def: _cmd_def.deleteMe()
    _menu = None
    _cmd_def = None
    _handlers.clear()
    logger.info(f"Removed '{CMD_NAME}' from the {MENU_NAME} menu")

# --- Add-in lifecycle ---
def run(context):
    global _system
    _system = get_system()
    logger.debug(f"Platform: {_system.value}")
    try:
        load_guard.run_once(__file__, install_menu, ctx.ui())
    except Exception:
        logger.error(traceback.format_exc())
        ctx.message_box(f'Unexpected error while loading (run):\n{traceback.format_exc()}')

def stop(context):
    try:
        remove_menu()
    except Exception:
        logger.error(traceback.format_exc())
        ctx.message_box(f'Unexpected error while unloading (stop):\n{traceback.format_exc()}')
    finally:
        load_guard.file_unloaded(__file__)
