"""Exceptions raised by the layer model and host adapters."""


class LockUnsupportedError(AttributeError):
    """A protection dimension is not available for this kind of layer."""


class NoDocumentError(RuntimeError):
    """The host application has no open document."""
