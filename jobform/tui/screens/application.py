"""Single-page job application screen."""

from __future__ import annotations

import logging

from textual.app import ComposeResult
from textual.containers import Horizontal, ScrollableContainer, Vertical
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Static

from jobform.constants import (
    DISCRIMINATOR_FIELD,
    JOB_CATEGORIES,
    JobCategory,
)
from jobform.models import ApplicationForm, CATEGORY_VALIDATORS
from jobform.tui.widgets.enum_select import EnumSelect
from jobform.tui.widgets.validated_input import ValidatedInput

logger = logging.getLogger(__name__)

SECTION_IDS: dict[JobCategory, str] = {
    JobCategory.FRESHER: "fresher_section",
    JobCategory.INTERNSHIP: "internship_section",
    JobCategory.WORKING_PROFESSIONAL: "professional_section",
}

PLACEHOLDERS: dict[str, str] = {
    "mobile": "10 digits",
    "birthday": "YYYY-MM-DD",
    "address.zip": "6 digits",
    "graduationYear": "2022-2024",
    "cgpa": "60-100",
    "internDuration": "3-6",
    "noticePeriod": "1-90",
}


class ApplicationScreen(Screen):
    """Job application form.

    Shows the personal and address fields, the job category, and the
    section belonging to the selected category.
    """

    BINDINGS = [
        ("ctrl+s", "submit", "Submit"),
        ("ctrl+r", "reset", "Reset"),
        ("escape", "quit", "Quit"),
    ]

    DEFAULT_CSS = """
    ApplicationScreen .form-container {
        padding: 1 2;
    }

    ApplicationScreen .section-title {
        text-style: bold;
        color: $primary;
        margin-bottom: 1;
        border-bottom: solid $primary;
        padding-bottom: 1;
    }

    ApplicationScreen .button-row {
        height: auto;
        align: center middle;
        padding: 1;
        dock: bottom;
    }

    ApplicationScreen Button {
        margin: 0 1;
    }

    ApplicationScreen .conditional-section {
        height: auto;
        margin-top: 1;
        padding: 1;
        border: round $secondary;
    }

    ApplicationScreen .hidden {
        display: none;
    }
    """

    def __init__(
        self,
        form: ApplicationForm,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self.form = form

    def _input(self, path: str) -> ValidatedInput:
        return ValidatedInput(self.form, path, placeholder=PLACEHOLDERS.get(path, ""))

    def compose(self) -> ComposeResult:
        """Compose the application layout."""
        yield Header()
        with ScrollableContainer(classes="form-container"):
            yield Static("Personal Details", classes="section-title")
            for path in ("firstname", "lastname", "email", "mobile", "birthday"):
                yield self._input(path)

            yield Static("Address", classes="section-title")
            for path in ("address.street", "address.city", "address.state", "address.zip"):
                yield self._input(path)

            yield Static("Job Details", classes="section-title")
            yield EnumSelect(
                self.form,
                DISCRIMINATOR_FIELD,
                [(c.value, c.value) for c in JOB_CATEGORIES],
            )

            with Vertical(id="additional_fields", classes="hidden"):
                for category, section_id in SECTION_IDS.items():
                    with Vertical(id=section_id, classes="conditional-section hidden"):
                        yield Static(category.value, classes="section-title")
                        for path in CATEGORY_VALIDATORS[category]:
                            yield self._input(path)

        with Horizontal(classes="button-row"):
            yield Button("Reset", id="btn_reset")
            yield Button("Submit", variant="primary", id="btn_submit")
        yield Footer()

    def on_enum_select_changed(self, event: EnumSelect.Changed) -> None:
        """Switch the category section when the category changes."""
        self.apply_category(event.value)

    def apply_category(self, value: str) -> None:
        """Write the category to the form and show the matching section."""
        self.form.set_value(DISCRIMINATOR_FIELD, value)
        self._update_category_sections()
        self.refresh_fields()

    def _update_category_sections(self) -> None:
        """Show/hide category-specific sections."""
        additional = self.query_one("#additional_fields")
        additional.set_class(not self.form.show_additional_fields, "hidden")

        for category, section_id in SECTION_IDS.items():
            section = self.query_one(f"#{section_id}")
            section.set_class(category is not self.form.category, "hidden")

    def refresh_fields(self) -> None:
        """Pull values and errors from the form into every widget."""
        for widget in self.query(ValidatedInput):
            widget.sync_from_form()
        for select in self.query(EnumSelect):
            select.refresh_state()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button clicks."""
        if event.button.id == "btn_submit":
            self.action_submit()
        elif event.button.id == "btn_reset":
            self.action_reset()

    def action_submit(self) -> None:
        """Submit the form, or reveal every error if it is invalid."""
        result = self.form.submit()
        self.refresh_fields()
        if result.ok:
            self.app.acknowledge(result)
        else:
            self.app.notify(
                f"Please correct {result.error_count()} highlighted field(s)",
                title="Form incomplete",
                severity="error",
            )

    def action_reset(self) -> None:
        """Clear every field."""
        self.form.reset()
        self.query_one(EnumSelect).clear()
        self._update_category_sections()
        self.refresh_fields()
        logger.debug("Form reset")

    def action_quit(self) -> None:
        self.app.exit()
