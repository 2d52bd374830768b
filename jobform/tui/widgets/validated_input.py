"""Input widget bound to a form field, with inline error display."""

from __future__ import annotations

from textual import events
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.message import Message
from textual.reactive import reactive
from textual.widgets import Input, Label, Static

from jobform.constants import get_field_label
from jobform.models import ApplicationForm


def dom_key(field_path: str) -> str:
    """DOM-safe identifier for a dotted field path."""
    return field_path.replace(".", "-")


class ValidatedInput(Vertical):
    """Input field with label, validation, and error display.

    Every keystroke is written to the form. Errors stay hidden until the
    field loses focus or a submit attempt marks every field touched.

    Attributes:
        value: Current input value
        error_message: First visible error for the field (empty if none)
    """

    DEFAULT_CSS = """
    ValidatedInput {
        height: auto;
        margin-bottom: 1;
    }

    ValidatedInput .field-label {
        color: $text;
        margin-bottom: 0;
    }

    ValidatedInput Input {
        width: 100%;
    }

    ValidatedInput Input.-invalid {
        border: tall $error;
    }

    ValidatedInput .error-text {
        color: $error;
        height: auto;
        margin-top: 0;
    }

    ValidatedInput .help-text {
        color: $text-muted;
        height: auto;
        margin-top: 0;
    }
    """

    value: reactive[str] = reactive("")
    error_message: reactive[str] = reactive("")

    class Changed(Message):
        """Posted when the input value changes."""

        def __init__(self, validated_input: "ValidatedInput", value: str) -> None:
            super().__init__()
            self.validated_input = validated_input
            self.value = value

    def __init__(
        self,
        form: ApplicationForm,
        field_path: str,
        label: str | None = None,
        *,
        help_text: str = "",
        placeholder: str = "",
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the validated input.

        Args:
            form: Form the input reads from and writes to
            field_path: Dotted path of the bound field (e.g. "address.zip")
            label: Display label (defaults to the field's label)
            help_text: Help text shown below input
            placeholder: Placeholder text in input
            id: Widget ID
            classes: CSS classes
        """
        super().__init__(id=id or f"{dom_key(field_path)}_field", classes=classes)
        self.form = form
        self.field_path = field_path
        self.label_text = label or get_field_label(field_path.rsplit(".", 1)[-1])
        self.help_text = help_text
        self.placeholder = placeholder
        self.value = self._form_value()

    def _form_value(self) -> str:
        value = self.form.get_value(self.field_path)
        return "" if value is None else str(value)

    def _label_display(self) -> str:
        if self.form.get_field(self.field_path).is_required:
            return f"{self.label_text} [red]*[/red]"
        return self.label_text

    def compose(self) -> ComposeResult:
        """Compose the widget layout."""
        key = dom_key(self.field_path)
        yield Label(self._label_display(), classes="field-label", id=f"{key}_label")
        yield Input(
            value=self.value,
            placeholder=self.placeholder,
            id=f"{key}_input",
        )
        yield Static("", classes="error-text", id=f"{key}_error")
        if self.help_text:
            yield Static(self.help_text, classes="help-text")

    def on_input_changed(self, event: Input.Changed) -> None:
        """Write the new value to the form and refresh error display."""
        event.stop()
        if event.value == self._form_value():
            self.refresh_state()
            return
        self.value = event.value
        self.form.set_value(self.field_path, event.value)
        self.refresh_state()
        self.post_message(self.Changed(self, event.value))

    def on_descendant_blur(self, event: events.DescendantBlur) -> None:
        """Leaving the input makes its errors visible."""
        self.form.mark_touched(self.field_path)
        self.refresh_state()

    def refresh_state(self) -> None:
        """Update label, error text and styling from the form."""
        messages = self.form.error_messages(self.field_path)
        self.error_message = messages[0] if messages else ""

        key = dom_key(self.field_path)
        self.query_one(f"#{key}_label", Label).update(self._label_display())
        self.query_one(f"#{key}_error", Static).update(self.error_message)
        self.query_one(f"#{key}_input", Input).set_class(bool(messages), "-invalid")

    def sync_from_form(self) -> None:
        """Pull the field's current value into the input."""
        self.value = self._form_value()
        input_widget = self.query_one(f"#{dom_key(self.field_path)}_input", Input)
        if input_widget.value != self.value:
            input_widget.value = self.value
        self.refresh_state()

    def focus_input(self) -> None:
        """Focus the input field."""
        self.query_one(f"#{dom_key(self.field_path)}_input", Input).focus()
