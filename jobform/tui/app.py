"""Textual application hosting the job application form.

The app owns one ``ApplicationForm`` for the session. It shows the
acknowledgement after a successful submit and hands the snapshot to an
optional ``submit_handler`` callback; nothing is sent anywhere by default.
"""

from __future__ import annotations

import uuid
from typing import Any, Callable, Mapping, Optional

from textual.app import App

from jobform.logging_config import get_logger
from jobform.models import ApplicationForm, SubmissionResult
from jobform.settings import FormSettings, get_settings
from jobform.tui.screens.application import ApplicationScreen

SubmitHandler = Callable[[Mapping[str, Any]], None]


class JobApplicationApp(App):
    """Terminal front end for the application form."""

    TITLE = "Job Application"

    def __init__(
        self,
        form: Optional[ApplicationForm] = None,
        settings: Optional[FormSettings] = None,
        submit_handler: Optional[SubmitHandler] = None,
    ) -> None:
        """Initialize the app.

        Args:
            form: Form to edit (a fresh one by default)
            settings: Display settings (loaded from .jobform.yaml by default)
            submit_handler: Receives the value snapshot after a successful submit
        """
        super().__init__()
        self.form = form or ApplicationForm.from_schema_defaults()
        self.settings = settings or get_settings()
        self.submit_handler = submit_handler
        self.session_id = uuid.uuid4().hex[:8]
        self.session_log = get_logger(__name__, extra={"session": self.session_id})

    def on_mount(self) -> None:
        self.session_log.info("Application form opened")
        self.push_screen(ApplicationScreen(self.form))

    def acknowledge(self, result: SubmissionResult) -> None:
        """Show the acknowledgement and forward the snapshot."""
        self.notify(
            self.settings.acknowledgement(),
            title="Success",
            severity="information",
            timeout=self.settings.notification_timeout,
        )
        if self.submit_handler is not None and result.snapshot is not None:
            self.submit_handler(result.snapshot)
        self.session_log.info(
            "Acknowledgement shown for submission at %s", result.submitted_at.isoformat()
        )


def run_app(settings: Optional[FormSettings] = None) -> None:
    """Run the form until the user quits."""
    JobApplicationApp(settings=settings).run()
