from enum import Enum


class ErrorKind(Enum):
    VALIDATION = "validation"
    UPSTREAM_FETCH = "upstream_fetch"
    MODEL_INVOCATION = "model_invocation"


STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.UPSTREAM_FETCH: 500,
    ErrorKind.MODEL_INVOCATION: 500,
}


class AskError(Exception):
    """Base for every failure the /ask endpoint reports on purpose."""

    kind = None

    @property
    def status_code(self):
        return STATUS_BY_KIND[self.kind]

    @property
    def message(self):
        return str(self) or self.__class__.__name__


class ValidationError(AskError):
    kind = ErrorKind.VALIDATION


class UpstreamFetchError(AskError):
    kind = ErrorKind.UPSTREAM_FETCH


class ModelInvocationError(AskError):
    kind = ErrorKind.MODEL_INVOCATION
