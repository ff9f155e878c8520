# tests/conftest.py

import sys
import types
from unittest.mock import MagicMock

import pytest


class _EventHandler:
    def __init__(self):
        pass


def _host_modules():
    adsk = types.ModuleType('adsk')
    core = MagicMock(name='adsk.core')
    core.CommandCreatedEventHandler = type('CommandCreatedEventHandler', (_EventHandler,), {})
    core.CommandEventHandler = type('CommandEventHandler', (_EventHandler,), {})
    fusion = MagicMock(name='adsk.fusion')
    adsk.core = core
    adsk.fusion = fusion
    return {'adsk': adsk, 'adsk.core': core, 'adsk.fusion': fusion}


# adsk only exists inside Fusion's interpreter; outside it the tests talk to mocks.
for _name, _module in _host_modules().items():
    sys.modules.setdefault(_name, _module)


def _reset_state():
    import hc_extensions
    import hc_load_guard
    import hello_cube_main

    hc_load_guard._loaded_files.clear()
    hc_extensions._extensions.clear()
    hello_cube_main._handlers.clear()
    hello_cube_main._cmd_def = None
    hello_cube_main._menu = None


@pytest.fixture(autouse=True)
def clean_state():
    """Start every test with an empty registry, no load guards and fresh host mocks."""
    _reset_state()
    for name in ('adsk.core', 'adsk.fusion'):
        module = sys.modules[name]
        if isinstance(module, MagicMock):
            module.reset_mock()
    yield
    _reset_state()


@pytest.fixture
def adsk_core():
    return sys.modules['adsk.core']


@pytest.fixture
def adsk_fusion():
    return sys.modules['adsk.fusion']


@pytest.fixture
def design(monkeypatch):
    """A parametric design whose timeline marker sits at the end of three features."""
    import hc_context

    design = MagicMock(name='design')
    design.timeline.markerPosition = 3
    design.timeline.count = 3
    monkeypatch.setattr(hc_context, 'active_design', lambda: design)
    return design


class FakeUI:
    """
    MagicMock-backed user interface that keeps real collections of panels,
    command definitions and panel controls so lookups see earlier additions.
    """
    def __init__(self):
        self.ui = MagicMock(name='ui')
        self.panels = {}
        self.cmd_defs = {}
        self.workspace = self.ui.workspaces.itemById.return_value
        self.workspace.toolbarPanels.itemById.side_effect = self.panels.get
        self.workspace.toolbarPanels.add.side_effect = self._add_panel
        self.ui.commandDefinitions.itemById.side_effect = self.cmd_defs.get
        self.ui.commandDefinitions.addButtonDefinition.side_effect = self._add_cmd_def

    def _add_panel(self, panel_id, name, position_id, is_before):
        panel = MagicMock(name=f'panel:{panel_id}')
        panel.id, panel.name = panel_id, name
        controls = {}
        panel.control_map = controls
        panel.controls.itemById.side_effect = controls.get
        panel.controls.addCommand.side_effect = lambda cmd_def: self._add_control(controls, cmd_def)
        type(panel.controls).count = property(lambda _: len(controls))
        panel.deleteMe.side_effect = lambda: self.panels.pop(panel_id)
        self.panels[panel_id] = panel
        return panel

    def _add_control(self, controls, cmd_def):
        control = MagicMock(name=f'control:{cmd_def.id}')
        control.id = cmd_def.id
        control.deleteMe.side_effect = lambda: controls.pop(cmd_def.id)
        controls[cmd_def.id] = control
        return control

    def _add_cmd_def(self, cmd_id, name, tooltip):
        cmd_def = MagicMock(name=f'cmd_def:{cmd_id}')
        cmd_def.id, cmd_def.name, cmd_def.tooltip = cmd_id, name, tooltip
        cmd_def.deleteMe.side_effect = lambda: self.cmd_defs.pop(cmd_id)
        self.cmd_defs[cmd_id] = cmd_def
        return cmd_def

    def controls(self, panel_id):
        panel = self.panels.get(panel_id)
        return list(panel.control_map.values()) if panel else []


@pytest.fixture
def fake_ui(monkeypatch):
    import hc_context

    fake = FakeUI()
    monkeypatch.setattr(hc_context, 'ui', lambda: fake.ui)
    return fake
