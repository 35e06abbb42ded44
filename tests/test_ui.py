"""Unit tests for ui/components.py."""

from ssosync.ui import profile_text, render_profile, render_status
from ssosync.ui.components import console


def test_profile_text_renders_ini_section():
    """Test a profile is formatted like its config file section."""
    text = profile_text("mock-mockaccount", {"sso_account_id": "123456789012", "region": "us-east-1"})

    assert text.plain == "[mock-mockaccount]\nsso_account_id = 123456789012\nregion = us-east-1"


def test_render_profile_shows_action_and_values():
    """Test the preview card carries the section, values and action."""
    with console.capture() as capture:
        render_profile("mock-mockaccount", {"region": "us-east-1"}, "add")

    output = capture.get()
    assert "[mock-mockaccount]" in output
    assert "region = us-east-1" in output
    assert "add" in output


def test_render_status_with_detail():
    """Test status lines carry the severity icon and optional detail."""
    with console.capture() as capture:
        render_status("Removing: mock-mockaccount", level="info", detail="dry run")

    output = capture.get()
    assert "• Removing: mock-mockaccount" in output
    assert "dry run" in output
