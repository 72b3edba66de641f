"""Cliente para o webhook de check-in do Tissue.

Uso:
    from tissue import CheckinBuilder, IncomingEndpoint, SuccessResponse

    builder = CheckinBuilder.now_local()
    builder.set_note("cyan.png").set_private(True)

    endpoint = IncomingEndpoint("webhook-id")
    response = await endpoint.send_checkin(builder.build())
    if isinstance(response, SuccessResponse):
        print(response.checkin.id)
"""

from tissue.connectors import HttpClient, HttpClientConfig, IncomingEndpoint
from tissue.domain import (
    MAX_LINK_LENGTH,
    MAX_NOTE_LENGTH,
    Checkin,
    CheckinBuilder,
    CheckinResponse,
    OtherErrorResponse,
    ReceivedCheckin,
    SuccessResponse,
    ValidationErrorResponse,
)
from tissue.protocols import RequestSenderProtocol
from tissue.services import classify_response
from tissue.utils.errors import (
    BuilderConsumedError,
    CheckinError,
    HasWhitespacesError,
    ResponseDecodeError,
    ResponseProtocolError,
    TissueError,
    TooLongError,
    TransportError,
    UnexpectedStatusError,
)

__version__ = "0.1.0"

__all__ = [
    "MAX_LINK_LENGTH",
    "MAX_NOTE_LENGTH",
    "BuilderConsumedError",
    "Checkin",
    "CheckinBuilder",
    "CheckinError",
    "CheckinResponse",
    "HasWhitespacesError",
    "HttpClient",
    "HttpClientConfig",
    "IncomingEndpoint",
    "OtherErrorResponse",
    "ReceivedCheckin",
    "RequestSenderProtocol",
    "ResponseDecodeError",
    "ResponseProtocolError",
    "SuccessResponse",
    "TissueError",
    "TooLongError",
    "TransportError",
    "UnexpectedStatusError",
    "ValidationErrorResponse",
    "classify_response",
]
