# hello_cube.py - v 1.0.0 2025.10.19
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

import traceback
import logging

import hc_context as ctx
import hc_extensions as extensions
import hc_load_guard as load_guard
import hc_logger

logger = logging.getLogger('hello_cube')

DEBUG = False
EXTENSION_NAME = 'Hello Cube'


def build_extension():
    ex = extensions.Extension(EXTENSION_NAME, 'hello_cube_main')
    ex.description = 'Fusion 360 API example creating a cube.'
    ex.version     = '1.0.0'
    ex.copyright   = 'Kanbara Tomonori © 2025'
    ex.creator     = 'Kanbara Tomonori'
    return ex

def _register(context):
    extensions.register_extension(build_extension(), True, context)

# --- Add-in lifecycle ---
def run(context):
    try:
        if DEBUG:
            hc_logger.setup_logging(logging.DEBUG, hc_logger.LOG_FILE_PATH)
        else:
            hc_logger.setup_logging()
        load_guard.run_once(__file__, _register, context)
    except Exception:
        logger.error(traceback.format_exc())
        ctx.message_box(f'Unexpected error while registering the add-in (run):\n{traceback.format_exc()}')

def stop(context):
    try:
        extensions.unregister_extension(EXTENSION_NAME, context)
    except Exception:
        logger.error(traceback.format_exc())
        ctx.message_box(f'Unexpected error while unregistering the add-in (stop):\n{traceback.format_exc()}')
    finally:
        load_guard.file_unloaded(__file__)
