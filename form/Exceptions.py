class BootstrapFormError(Exception):
    """Base class for every error raised by bootstrap_form."""


class InvalidArgumentError(BootstrapFormError, ValueError):
    """An argument (usually the element handed to a helper) has the wrong type or value."""


class DomainError(BootstrapFormError, ValueError):
    """The element is missing something a helper needs (name, label, src...)."""


class HelperRuntimeError(BootstrapFormError, RuntimeError):
    pass


class ServiceNotFoundError(BootstrapFormError, LookupError):
    pass
