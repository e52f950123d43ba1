class PicklesError(Exception):
    pass


class UnknownLanguageError(PicklesError, ValueError):
    pass


class KeywordResolutionError(PicklesError, ValueError):
    pass


class MalformedTableError(PicklesError, ValueError):
    pass


class UnsupportedNodeKindError(PicklesError, TypeError):
    pass


class MalformedReportError(PicklesError, ValueError):
    pass


class UnsupportedOperationError(PicklesError, NotImplementedError):
    pass
