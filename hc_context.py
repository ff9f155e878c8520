# hc_context.py - v 1.0.0 2025.10.19
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

import adsk.core, adsk.fusion


def app():
    return adsk.core.Application.get()

def ui():
    application = app()
    return application.userInterface if application else None

def active_design():
    design = adsk.fusion.Design.cast(app().activeProduct)
    if not design:
        raise RuntimeError('No active design. Open a design in the Design workspace.')
    return design

def message_box(text: str, title: str='Hello Cube'):
    user_interface = ui()
    if user_interface: user_interface.messageBox(text, title)
