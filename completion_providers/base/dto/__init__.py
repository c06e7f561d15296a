"""Wire DTOs for the chat completions streaming protocol."""

from .role import Role
from .completion_request import RequestMessage, CompletionRequest
from .stream_event import ResponseMessage, Usage, ChatChoiceDelta, StreamEvent
from .error_body import ErrorDetail, ErrorBody

__all__ = [
    "Role",
    "RequestMessage",
    "CompletionRequest",
    "ResponseMessage",
    "Usage",
    "ChatChoiceDelta",
    "StreamEvent",
    "ErrorDetail",
    "ErrorBody",
]
