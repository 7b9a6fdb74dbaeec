"""
================================================================================
PYTEST CONFIGURATION
================================================================================

Pytest configuration and shared fixtures for the entire test suite.

Global Fixtures:
    - isolated_cwd: Runs every test from a temp directory so config.json
      and log lookups never touch the real project
    - quiet_logging: Test run context with console logging silenced
    - store / directory: Fresh seeded records per test
    - scripted_input: Feeds canned answers to input()

Author: robertbiv
================================================================================
"""
import os
import sys
import builtins
from pathlib import Path

import pytest

# Ensure project root is on sys.path for cli.py imports
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from employee_directory.core import EmployeeDirectory, EmployeeStore
from employee_directory.utils import constants
from employee_directory.utils.logger import set_run_context


def pytest_configure(config):
    os.environ['TEST_MODE'] = '1'


def pytest_unconfigure(config):
    if 'TEST_MODE' in os.environ:
        del os.environ['TEST_MODE']


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Point every path constant at a throwaway directory."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(constants, 'BASE_DIR', tmp_path)
    monkeypatch.setattr(constants, 'CONFIG_FILE', tmp_path / 'configs' / 'config.json')
    monkeypatch.setattr(constants, 'LOG_DIR', tmp_path / 'outputs' / 'logs')
    yield tmp_path


@pytest.fixture(autouse=True)
def quiet_logging():
    set_run_context('test', level='CRITICAL')
    yield
    set_run_context('test', level='CRITICAL')


@pytest.fixture
def store():
    return EmployeeStore.seeded()


@pytest.fixture
def directory(store):
    return EmployeeDirectory(store)


@pytest.fixture
def scripted_input(monkeypatch):
    """
    Replace input() with a list of canned answers.

    Usage:
        answers = scripted_input(['1001', '6'])
    Prompts seen are collected in answers.prompts.
    """
    class Script:
        def __init__(self, answers):
            self.answers = list(answers)
            self.prompts = []

        def __call__(self, prompt=''):
            self.prompts.append(prompt)
            if not self.answers:
                raise EOFError("script exhausted")
            return self.answers.pop(0)

    def _install(answers):
        script = Script(answers)
        monkeypatch.setattr(builtins, 'input', script)
        return script

    return _install
