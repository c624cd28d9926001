"""Mini README: Tests for the tab shell.

Ensures that exactly one tab is active at a time and unknown tabs are
refused, providing a quick regression suite for the page navigation.
"""

import pytest

from agrodesk.interface import DEFAULT_TABS, TabShell


def test_first_tab_is_active_by_default():
    shell = TabShell()
    assert shell.active == DEFAULT_TABS[0].tab_id
    assert sum(active for _, active in shell.panels()) == 1


def test_activate_switches_the_single_active_tab():
    shell = TabShell()
    shell.activate("calendar")
    shell.activate("weather")
    assert shell.active == "weather"
    assert [tab.tab_id for tab, active in shell.panels() if active] == ["weather"]


def test_unknown_tab_is_refused():
    shell = TabShell()
    assert "reports" not in shell
    with pytest.raises(KeyError):
        shell.activate("reports")
    assert shell.active == "financial"
