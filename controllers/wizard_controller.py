# -*- coding: utf-8 -*-
"""
Wizard Controller
=================
State machine behind the schema-driven form wizard.

States: LOADING -> READY(index) -> SUBMITTED, or LOADING -> ERROR(reason).

The controller owns the value store, the current section index, the
displayed errors and the submission lifecycle. Views only report intents
(field edits, navigation clicks) and re-render from the signals below.
"""

from collections import deque
from functools import wraps
from typing import Callable, Dict, List, Optional, Union

from PyQt5.QtCore import QThread, QTimer, pyqtSignal

from app.config import Config
from controllers.base_controller import BaseController
from models.form_schema import FieldValue, FormSchema, FormSection
from models.identity import Identity
from services.error_mapper import map_exception
from services.exceptions import SchemaFetchError
from services.submission_sink import LoggingSubmissionSink, SubmissionSink
from services.validation import SectionValidationResult, ValidationError, ValidationFactory
from ui.wizards.framework.step_navigator import StepNavigator
from ui.wizards.framework.wizard_context import WizardContext, WizardStatus
from utils.logger import get_logger

logger = get_logger(__name__)

SchemaSource = Callable[[str], FormSchema]


class SchemaFetchWorker(QThread):
    """Background worker for schema retrieval."""

    loaded = pyqtSignal(object)  # FormSchema
    failed = pyqtSignal(object)  # Exception

    def __init__(self, schema_source: SchemaSource, roll_number: str):
        super().__init__()
        self.schema_source = schema_source
        self.roll_number = roll_number

    def run(self):
        """Fetch the schema in background."""
        try:
            schema = self.schema_source(self.roll_number)
        except SchemaFetchError as e:
            self.failed.emit(e)
            return
        except Exception as e:
            logger.error(f"Unexpected error fetching schema: {e}", exc_info=True)
            self.failed.emit(SchemaFetchError(str(e), cause=e))
            return
        self.loaded.emit(schema)


def serialized_event(handler):
    """
    Run a controller event to completion before accepting the next one.

    An event raised while another handler is running (e.g. from a slot
    connected to one of our signals) is queued and processed afterwards.
    Events arriving after teardown are dropped.
    """
    @wraps(handler)
    def wrapper(self, *args, **kwargs):
        if self._disposed:
            logger.debug(f"Ignoring {handler.__name__}: controller torn down")
            return False

        if self._busy:
            logger.debug(f"Queueing {handler.__name__} behind the running event")
            self._pending.append((handler, args, kwargs))
            return None

        self._busy = True
        try:
            result = handler(self, *args, **kwargs)
            while self._pending and not self._disposed:
                queued, q_args, q_kwargs = self._pending.popleft()
                queued(self, *q_args, **q_kwargs)
        finally:
            self._pending.clear()
            self._busy = False
        return result

    return wrapper


class WizardController(BaseController):
    """
    Coordinates navigation, validation and submission across sections.

    Signals:
        status_changed(str): new WizardStatus value
        schema_ready(object): schema loaded, wizard at section 0
        load_failed(str): user-facing reason for the ERROR state
        section_changed(int, int): old index, new index
        value_changed(str, object): field id, stored value
        errors_changed(list): currently displayed ValidationErrors
        form_submitted(dict): the submitted value store
        return_to_start(): deferred post-submit return fired
    """

    status_changed = pyqtSignal(str)
    schema_ready = pyqtSignal(object)
    load_failed = pyqtSignal(str)
    section_changed = pyqtSignal(int, int)
    value_changed = pyqtSignal(str, object)
    errors_changed = pyqtSignal(list)
    form_submitted = pyqtSignal(dict)
    return_to_start = pyqtSignal()

    # Workers outlive a torn-down controller until their thread finishes
    _active_workers = set()

    def __init__(
        self,
        identity: Identity,
        schema_source: Optional[SchemaSource] = None,
        submission_sink: Optional[SubmissionSink] = None,
        redirect_delay_ms: Optional[int] = None,
        validator: Optional[ValidationFactory] = None,
        parent=None
    ):
        super().__init__(parent)
        self.identity = identity
        self.schema: Optional[FormSchema] = None
        self.context = WizardContext(user_id=identity.roll_number)
        self.navigator = StepNavigator(self.context, 0, self)
        self.navigator.step_changed.connect(self.section_changed)
        self.validator = validator or ValidationFactory()

        if schema_source is None:
            from services.form_api_service import FormApiService
            schema_source = FormApiService().get_form
        self._schema_source = schema_source
        self._sink = submission_sink or LoggingSubmissionSink()

        if redirect_delay_ms is None:
            redirect_delay_ms = Config.SUBMIT_REDIRECT_DELAY_MS
        self._return_timer = QTimer(self)
        self._return_timer.setSingleShot(True)
        self._return_timer.setInterval(redirect_delay_ms)
        self._return_timer.timeout.connect(self._on_return_timer)

        self._disposed = False
        self._busy = False
        self._pending = deque()

    # =========================================================================
    # State accessors
    # =========================================================================

    @property
    def status(self) -> WizardStatus:
        return self.context.status

    @property
    def current_index(self) -> int:
        return self.context.current_section_index

    @property
    def section_count(self) -> int:
        return self.schema.section_count if self.schema else 0

    @property
    def is_first_section(self) -> bool:
        return self.navigator.is_first()

    @property
    def is_last_section(self) -> bool:
        return self.schema is not None and self.navigator.is_last()

    @property
    def errors(self) -> List[ValidationError]:
        return list(self.context.errors)

    @property
    def error_reason(self) -> Optional[str]:
        return self.context.error_reason

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    @property
    def is_return_pending(self) -> bool:
        return self._return_timer.isActive()

    def values(self) -> Dict[str, FieldValue]:
        """Copy of the value store."""
        return self.context.snapshot()

    def get_value(self, field_id: str) -> Optional[FieldValue]:
        return self.context.get_value(field_id)

    def error_for(self, field_id: str) -> Optional[ValidationError]:
        for error in self.context.errors:
            if error.field_id == field_id:
                return error
        return None

    def current_section(self) -> Optional[FormSection]:
        """
        Section to render.

        An index outside the section range is reset to 0 before indexing.
        """
        if self.schema is None or self.schema.is_empty:
            return None
        if self.navigator.ensure_in_range():
            self.context.clear_errors()
            self.errors_changed.emit([])
        return self.schema.sections[self.current_index]

    # =========================================================================
    # Schema loading
    # =========================================================================

    def load(self):
        """Start the asynchronous schema fetch for the identity."""
        if self._disposed:
            return
        if self._worker_running():
            logger.debug("Schema fetch already in flight")
            return

        self._set_status(WizardStatus.LOADING)
        self._emit_started("load_schema")
        logger.info(f"Fetching form schema for {self.identity.roll_number}")

        worker = SchemaFetchWorker(self._schema_source, self.identity.roll_number)
        worker.loaded.connect(self.on_schema_loaded)
        worker.failed.connect(self.on_schema_load_failed)
        worker.finished.connect(lambda: self._release_worker(worker))
        WizardController._active_workers.add(worker)
        self._worker = worker
        worker.start()

    def _worker_running(self) -> bool:
        worker = getattr(self, "_worker", None)
        return worker is not None and worker.isRunning()

    def _release_worker(self, worker: SchemaFetchWorker):
        WizardController._active_workers.discard(worker)
        if getattr(self, "_worker", None) is worker:
            self._worker = None
        worker.deleteLater()

    @serialized_event
    def on_schema_loaded(self, schema: FormSchema) -> bool:
        """SchemaLoaded: LOADING -> READY(0)."""
        if self.status != WizardStatus.LOADING:
            logger.warning(f"Schema arrived in state {self.status.value}, ignoring")
            return False

        if schema.is_empty:
            self._fail(SchemaFetchError("Form has no sections", SchemaFetchError.REASON_EMPTY))
            return False

        self.schema = schema
        self.context.reset()
        self.navigator.set_step_count(schema.section_count)
        self._emit_completed("load_schema", True)
        self._set_status(WizardStatus.READY)
        logger.info(f"Form '{schema.title}' ready with {schema.section_count} sections")
        self.schema_ready.emit(schema)
        return True

    @serialized_event
    def on_schema_load_failed(self, error: Union[Exception, str]) -> bool:
        """SchemaLoadFailed: LOADING -> ERROR(reason)."""
        if self.status != WizardStatus.LOADING:
            logger.warning(f"Schema failure arrived in state {self.status.value}, ignoring")
            return False
        self._fail(error)
        return True

    def _fail(self, error: Union[Exception, str]):
        reason = error if isinstance(error, str) else map_exception(error, "schema")
        self.context.error_reason = reason
        self._emit_error("load_schema", str(error))
        self._set_status(WizardStatus.ERROR)
        self.load_failed.emit(reason)

    # =========================================================================
    # Field edits
    # =========================================================================

    @serialized_event
    def change_field(self, field_id: str, value: FieldValue) -> bool:
        """FieldChanged: write the value; index and displayed errors are untouched."""
        if self.status != WizardStatus.READY:
            logger.debug(f"Ignoring edit of {field_id} in state {self.status.value}")
            return False
        if self.schema.find_field(field_id) is None:
            logger.warning(f"Ignoring edit of unknown field {field_id}")
            return False

        self.context.set_value(field_id, value)
        logger.debug(f"Field {field_id} = {value!r}")
        self.value_changed.emit(field_id, self.context.get_value(field_id))
        return True

    # =========================================================================
    # Navigation
    # =========================================================================

    def validate_current_section(self) -> SectionValidationResult:
        """Validate the current section against the store without side effects."""
        section = self.current_section()
        if section is None:
            return SectionValidationResult.valid()
        return self.validator.validate_section(section.fields, self.context.values)

    @serialized_event
    def request_next(self) -> bool:
        """NextRequested: validate the current section and advance if valid."""
        if self.status != WizardStatus.READY:
            return False
        if self.is_last_section:
            logger.debug("Next is not offered on the last section")
            return False

        result = self.validate_current_section()
        if not result.is_valid:
            self._show_errors(result)
            return False

        self.context.mark_section_completed(self.current_index)
        self._clear_errors()
        return self.navigator.next_step()

    @serialized_event
    def request_previous(self) -> bool:
        """PreviousRequested: step back without validating the section being left."""
        if self.status != WizardStatus.READY:
            return False
        self.current_section()
        if not self.navigator.can_go_previous():
            return False

        self._clear_errors()
        return self.navigator.previous_step()

    @serialized_event
    def request_submit(self) -> bool:
        """SubmitRequested: validate the last section, hand the store to the sink."""
        if self.status != WizardStatus.READY:
            return False
        self.current_section()
        if not self.is_last_section:
            logger.debug("Submit is only offered on the last section")
            return False

        result = self.validate_current_section()
        if not result.is_valid:
            self._show_errors(result)
            return False

        values = self.context.snapshot()
        self._sink.submit(values)

        self.context.mark_section_completed(self.current_index)
        self._clear_errors()
        self._set_status(WizardStatus.SUBMITTED)
        logger.info(f"Form submitted with {len(values)} values (wizard {self.context.wizard_id})")
        self.form_submitted.emit(values)

        self._return_timer.start()
        return True

    def _show_errors(self, result: SectionValidationResult):
        logger.warning(
            f"Section {self.current_index} invalid: "
            f"{[(e.field_id, e.message) for e in result.errors]}"
        )
        self.context.set_errors(result.errors)
        self.errors_changed.emit(self.errors)

    def _clear_errors(self):
        if self.context.errors:
            self.context.clear_errors()
            self.errors_changed.emit([])

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def _set_status(self, status: WizardStatus):
        if self.context.status != status:
            logger.info(f"Wizard state: {self.context.status.value} → {status.value}")
        self.context.status = status
        self.status_changed.emit(status.value)

    def _on_return_timer(self):
        if self._disposed:
            return
        logger.info("Returning to start after submission")
        self.return_to_start.emit()

    def teardown(self):
        """
        Detach the controller from its view.

        Cancels the deferred return and makes any in-flight schema result a
        no-op.
        """
        if self._disposed:
            return
        self._disposed = True
        self._return_timer.stop()
        self._pending.clear()
        logger.info("Wizard controller torn down")
