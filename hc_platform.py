# hc_platform.py - v 1.0.0 2025.10.19
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

import sys
from enum import Enum


class System(str, Enum):
    MAC = 'Mac'
    WINDOWS = 'Windows'
    OTHER = 'Other'


def get_system(platform_string: str=None) -> System:
    """
    Classify a platform identifier as Mac, Windows or Other.
    Defaults to sys.platform. Unmatched strings, the empty one included, are Other.
    """
    if platform_string is None:
        platform_string = sys.platform
    platform_string = platform_string.lower()
    if 'darwin' in platform_string:
        return System.MAC
    if 'mswin' in platform_string or 'mingw' in platform_string:
        return System.WINDOWS
    return System.OTHER
