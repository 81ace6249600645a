"""Pytest configuration and fixtures.

Builds a throw-away project tree under tmp_path:

    app/containers/Siteapp/Actions/SwitchTemplateAction.py
    app/containers/Siteapp/Tasks/find_template_task.py
    app/containers/User/Actions/__init__.py   (exports RegisterUserAction)
    app/containers/Billing/                   (container without classes)
"""

import importlib
import sys
import textwrap
from pathlib import Path

import pytest

from porto.application import Application
from porto.core import Core
from porto.support import Config, EnvHelper, Storage
from porto.support.facades import Facade


SWITCH_TEMPLATE_ACTION = '''
class SwitchTemplateAction:
    def __init__(self):
        self.calls = []

    def init(self):
        self.calls.append(('init',))

    def configure(self, *args):
        self.calls.append(('configure',) + args)

    def run(self, apply_id, template_id):
        return {'apply_id': apply_id, 'template_id': template_id, 'calls': list(self.calls)}
'''

FIND_TEMPLATE_TASK = '''
class FindTemplateTask:
    def run(self, template_id):
        return f'template-{template_id}'
'''

USER_ACTIONS = '''
class RegisterUserAction:
    def __init__(self, mailer):
        self.mailer = mailer

    def run(self, email):
        return self.mailer.send(email)
'''


def _write(path: Path, content: str = ''):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(content), encoding='utf-8')


def _purge_project_modules():
    for name in list(sys.modules):
        if name in ('app', 'config') or name.startswith(('app.', 'config.')):
            del sys.modules[name]
    importlib.invalidate_caches()


def _reset_framework_state():
    Config.reload()
    Config.clear_runtime_overrides()
    EnvHelper._env_path = None
    EnvHelper._loaded = False
    Facade.set_app(None)


@pytest.fixture
def project(tmp_path, monkeypatch):
    """A project root with an app/containers tree importable as 'app'"""
    containers = tmp_path / 'app' / 'containers'
    _write(tmp_path / 'app' / '__init__.py')
    _write(containers / '__init__.py')

    _write(containers / 'Siteapp' / '__init__.py')
    _write(containers / 'Siteapp' / 'Actions' / '__init__.py')
    _write(containers / 'Siteapp' / 'Actions' / 'SwitchTemplateAction.py', SWITCH_TEMPLATE_ACTION)
    _write(containers / 'Siteapp' / 'Tasks' / '__init__.py')
    _write(containers / 'Siteapp' / 'Tasks' / 'find_template_task.py', FIND_TEMPLATE_TASK)

    _write(containers / 'User' / '__init__.py')
    _write(containers / 'User' / 'Actions' / '__init__.py', USER_ACTIONS)

    _write(containers / 'Billing' / '__init__.py')

    monkeypatch.delenv('APP_PATH', raising=False)
    monkeypatch.syspath_prepend(str(tmp_path))
    _purge_project_modules()
    _reset_framework_state()
    Storage.initialize(tmp_path)

    yield tmp_path

    _purge_project_modules()
    _reset_framework_state()
    Storage.initialize()


@pytest.fixture
def write_file(project):
    """Write a file relative to the project root"""
    def writer(relative_path: str, content: str = ''):
        _write(project / relative_path, content)
        importlib.invalidate_caches()
    return writer


@pytest.fixture
def app(project):
    """A bare application rooted at the project"""
    return Application(str(project))


@pytest.fixture
def core(app, project):
    """A caller backed by the application container"""
    return Core(app, app_path=project / 'app')
