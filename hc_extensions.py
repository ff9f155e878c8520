# hc_extensions.py - v 1.0.0 2025.10.19
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

import importlib
import logging

logger = logging.getLogger('hello_cube.extensions')

# --- Globals ---
_extensions = {}
_METADATA_ATTRS = ('name', 'load_path', 'description', 'version', 'copyright', 'creator')


class Extension:
    """
    Descriptor of a lazily loaded add-in module.
    Metadata is frozen once the descriptor is registered.
    """
    def __init__(self, name: str, load_path: str):
        self.name = name
        self.load_path = load_path
        self.description = ''
        self.version = ''
        self.copyright = ''
        self.creator = ''
        self.module = None

    def __setattr__(self, attr, value):
        if attr in _METADATA_ATTRS and self.registered:
            raise AttributeError(f"Extension '{self.name}' is registered; '{attr}' is read-only.")
        object.__setattr__(self, attr, value)

    @property
    def registered(self) -> bool:
        return _extensions.get(self.__dict__.get('name')) is self

    @property
    def loaded(self) -> bool:
        return self.module is not None

    @property
    def module_name(self) -> str:
        path = self.load_path.replace('\\', '/')
        if path.endswith('.py'): path = path[:-3]
        return path.strip('/').replace('/', '.')

    def load(self, context=None):
        if self.loaded: return self.module
        module = importlib.import_module(self.module_name)
        if not callable(getattr(module, 'run', None)):
            raise ValueError(f"Extension module '{self.module_name}' has no run(context).")
        module.run(context)
        self.module = module
        logger.info(f"Loaded extension '{self.name}' {self.version} from {self.module_name}")
        return module

    def unload(self, context=None):
        if not self.loaded: return
        stop = getattr(self.module, 'stop', None)
        self.module = None
        if callable(stop): stop(context)
        logger.info(f"Unloaded extension '{self.name}'")

    def to_manifest(self, run_on_startup: bool=True) -> dict:
        return {
            'autodeskProduct': 'Fusion360',
            'type': 'addin',
            'name': self.name,
            'author': self.creator,
            'description': {'': self.description},
            'version': self.version,
            'copyright': self.copyright,
            'runOnStartup': run_on_startup,
            'supportedOS': 'windows|mac',
            'editEnabled': True,
        }

    def __repr__(self):
        return f"Extension(name={self.name!r}, version={self.version!r}, load_path={self.load_path!r})"


def register_extension(extension: Extension, load: bool=False, context=None) -> bool:
    """
    Add `extension` to the registry and, when `load` is set, import and run it now.
    A name that is already registered is left alone and False is returned.
    """
    if extension.name in _extensions:
        logger.debug(f"Extension '{extension.name}' already registered")
        return False
    _extensions[extension.name] = extension
    logger.info(f"Registered extension '{extension.name}' {extension.version}")
    if load:
        extension.load(context)
    return True

def unregister_extension(name: str, context=None) -> bool:
    extension = _extensions.get(name)
    if extension is None: return False
    try:
        extension.unload(context)
    finally:
        del _extensions[name]
    logger.info(f"Unregistered extension '{name}'")
    return True

def find_extension(name: str):
    return _extensions.get(name)

def registered_extensions():
    return list(_extensions.values())
