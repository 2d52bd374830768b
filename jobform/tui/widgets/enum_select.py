"""Dropdown select bound to a choice field."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.message import Message
from textual.reactive import reactive
from textual.widgets import Label, Select, Static

from jobform.constants import get_field_label
from jobform.models import ApplicationForm
from jobform.tui.widgets.validated_input import dom_key


class EnumSelect(Vertical):
    """Dropdown select for enum/choice fields.

    Attributes:
        value: Currently selected value ("" when nothing is selected)
    """

    DEFAULT_CSS = """
    EnumSelect {
        height: auto;
        margin-bottom: 1;
    }

    EnumSelect .field-label {
        color: $text;
        margin-bottom: 0;
    }

    EnumSelect Select {
        width: 100%;
    }

    EnumSelect .error-text {
        color: $error;
        height: auto;
    }
    """

    value: reactive[str] = reactive("")

    class Changed(Message):
        """Posted when selection changes."""

        def __init__(self, enum_select: "EnumSelect", value: str) -> None:
            super().__init__()
            self.enum_select = enum_select
            self.value = value

    def __init__(
        self,
        form: ApplicationForm,
        field_path: str,
        options: list[tuple[str, str]],
        label: str | None = None,
        *,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the enum select.

        Args:
            form: Form the select writes to
            field_path: Dotted path of the bound field
            options: List of (value, display_label) tuples
            label: Display label (defaults to the field's label)
            id: Widget ID
            classes: CSS classes
        """
        super().__init__(id=id or f"{dom_key(field_path)}_field", classes=classes)
        self.form = form
        self.field_path = field_path
        self.options = options
        self.label_text = label or get_field_label(field_path)

    def compose(self) -> ComposeResult:
        """Compose the widget layout."""
        key = dom_key(self.field_path)
        yield Label(f"{self.label_text} [red]*[/red]", classes="field-label")
        yield Select(
            [(label, value) for value, label in self.options],
            prompt="-- Select --",
            allow_blank=True,
            id=f"{key}_select",
        )
        yield Static("", classes="error-text", id=f"{key}_error")

    def on_select_changed(self, event: Select.Changed) -> None:
        """Handle selection changes."""
        event.stop()
        # A cleared Select reports a sentinel rather than a string
        value = event.value if isinstance(event.value, str) else ""
        if value == self.value:
            return
        self.value = value
        self.post_message(self.Changed(self, value))

    def clear(self) -> None:
        """Drop the current selection."""
        self.value = ""
        self.query_one(f"#{dom_key(self.field_path)}_select", Select).clear()

    def refresh_state(self) -> None:
        """Show the first visible error for the bound field."""
        messages = self.form.error_messages(self.field_path)
        error_widget = self.query_one(f"#{dom_key(self.field_path)}_error", Static)
        error_widget.update(messages[0] if messages else "")
