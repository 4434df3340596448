"""
Submission of the create product form.

Validation is a pure function run before anything touches the network, so
a partially filled form never produces a request.
"""
from enum import Enum
from typing import Optional

from product_admin import messages
from product_admin.api.client import ApiClient
from product_admin.api.v1.product import create_product
from product_admin.core.config import get_settings
from product_admin.errors import ApiTransportError, MissingFieldError, ServerRejectionError
from product_admin.logging_config import get_logger
from product_admin.navigation import Navigator
from product_admin.notifications import NotificationKind, Notifier
from product_admin.schemas.outcome import (
    RejectedByServer,
    Success,
    SubmissionOutcome,
    TransportFailure,
)
from product_admin.schemas.product import FileHandle, MultipartPayload, ProductDraft, ValidDraft

logger = get_logger("submission")

REQUIRED_FIELDS = ("name", "description", "price", "quantity", "category_id", "shipping", "photo")


class SubmissionState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    BLOCKED = "blocked"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    REJECTED = "rejected"
    FAILED = "failed"


def _is_empty(value) -> bool:
    if value is None:
        return True
    if isinstance(value, FileHandle):
        return False
    return str(value) == ""


def validate_draft(draft: ProductDraft) -> ValidDraft:
    """
    Check that every required field is filled in.

    Args:
        draft: Current form values

    Returns:
        The draft as a ``ValidDraft`` with numeric fields as strings

    Raises:
        MissingFieldError: one or more required fields are empty
    """
    missing = [field for field in REQUIRED_FIELDS if _is_empty(getattr(draft, field))]
    if missing:
        raise MissingFieldError(missing)

    return ValidDraft(
        name=draft.name,
        description=draft.description,
        price=str(draft.price),
        quantity=str(draft.quantity),
        category_id=str(draft.category_id),
        shipping=str(draft.shipping),
        photo=draft.photo,
    )


def build_payload(valid: ValidDraft) -> MultipartPayload:
    """Multipart parts for the create-product request."""
    photo = valid.photo
    return MultipartPayload(
        data={
            "name": valid.name,
            "description": valid.description,
            "price": valid.price,
            "quantity": valid.quantity,
            "category": valid.category_id,
            "shipping": valid.shipping,
        },
        files={"photo": (photo.name, photo.content, photo.content_type)},
    )


class SubmissionController:
    """
    Runs one submit attempt per ``submit()`` call.

    IDLE -> VALIDATING -> BLOCKED -> IDLE
                       -> SUBMITTING -> SUCCEEDED (terminal)
                                     -> REJECTED -> IDLE
                                     -> FAILED -> IDLE

    Calls are not serialized: a second submit while one is in flight runs
    its own attempt.
    """

    def __init__(
        self,
        client: ApiClient,
        notifier: Notifier,
        navigator: Navigator,
        redirect_path: Optional[str] = None,
    ):
        self.client = client
        self.notifier = notifier
        self.navigator = navigator
        self.redirect_path = redirect_path or get_settings().products_redirect_path
        self.state = SubmissionState.IDLE
        self.history: list[SubmissionState] = [SubmissionState.IDLE]
        self.last_outcome: Optional[SubmissionOutcome] = None

    def reset(self) -> None:
        """Start a new form session from IDLE."""
        self.state = SubmissionState.IDLE
        self.history = [SubmissionState.IDLE]
        self.last_outcome = None

    def _enter(self, state: SubmissionState) -> None:
        self.state = state
        self.history.append(state)

    async def submit(self, draft: ProductDraft) -> Optional[SubmissionOutcome]:
        """
        Validate ``draft`` and, if complete, send it to the backend.

        Returns:
            The outcome of the request, or None when nothing was sent
            (missing fields, or the form session already succeeded).
        """
        if self.state is SubmissionState.SUCCEEDED:
            logger.warning("Submit ignored: product already created in this session")
            return None

        self.history = [SubmissionState.IDLE]
        self._enter(SubmissionState.VALIDATING)

        try:
            valid = validate_draft(draft)
        except MissingFieldError as e:
            logger.warning(f"Submit blocked: {e.message}")
            self._enter(SubmissionState.BLOCKED)
            self.notifier.notify(NotificationKind.ERROR, messages.MISSING_FIELDS)
            self._enter(SubmissionState.IDLE)
            return None

        payload = build_payload(valid)
        self._enter(SubmissionState.SUBMITTING)

        try:
            await create_product(self.client, payload)
        except ServerRejectionError as e:
            outcome = RejectedByServer(message=e.server_message or messages.SUBMIT_FAILED)
        except ApiTransportError as e:
            outcome = TransportFailure(reason=e.message)
        else:
            outcome = Success()

        self.last_outcome = outcome
        self._handle_outcome(outcome)
        return outcome

    def _handle_outcome(self, outcome: SubmissionOutcome) -> None:
        if isinstance(outcome, Success):
            self._enter(SubmissionState.SUCCEEDED)
            self.notifier.notify(NotificationKind.SUCCESS, messages.PRODUCT_CREATED)
            self.navigator.navigate(self.redirect_path)
        elif isinstance(outcome, RejectedByServer):
            logger.warning(f"Create product rejected: {outcome.message}")
            self._enter(SubmissionState.REJECTED)
            self.notifier.notify(NotificationKind.ERROR, outcome.message)
            self._enter(SubmissionState.IDLE)
        else:
            logger.error(f"Create product failed: {outcome.reason}")
            self._enter(SubmissionState.FAILED)
            self.notifier.notify(NotificationKind.ERROR, messages.SUBMIT_FAILED)
            self._enter(SubmissionState.IDLE)
