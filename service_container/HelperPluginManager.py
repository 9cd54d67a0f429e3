import logging

from bootstrap_form.form.Exceptions import ServiceNotFoundError

from ._ContainerInterface import ContainerInterface

logger = logging.getLogger("bootstrap_form.plugins")


def canonical_name(name: str) -> str:
    """``formRow``, ``FormRow``, ``form_row`` and ``form-row`` all map to ``formrow``."""
    return name.lower().replace("_", "").replace("-", "").replace(" ", "")


class HelperPluginManager(ContainerInterface):
    def __init__(self, factories=None, view=None, translator=None, text_domain=None):
        self._services = {}
        self._singletons = {}
        self._instances = {}
        self.view = view
        self.translator = translator
        self.text_domain = text_domain
        for name, factory in (factories or {}).items():
            self.add(name, factory)

    def add(self, name, factory, singleton=True):
        """Register a helper factory; shared helpers are created once per manager."""
        key = canonical_name(name)
        self._services.pop(key, None)
        self._singletons.pop(key, None)
        self._instances.pop(key, None)
        if singleton:
            self._singletons[key] = factory
        else:
            self._services[key] = factory

    def get(self, name):
        """Retrieve a helper, creating it on first use."""
        key = canonical_name(name)
        if key in self._singletons:
            if key not in self._instances:
                self._instances[key] = self._create(key, self._singletons[key])
            return self._instances[key]

        if key in self._services:
            return self._create(key, self._services[key])

        raise ServiceNotFoundError(f"A plugin by the name {name!r} was not found in the plugin manager")

    def has(self, name) -> bool:
        key = canonical_name(name)
        return key in self._services or key in self._singletons

    def has_singleton(self, name) -> bool:
        return canonical_name(name) in self._singletons

    def set_view(self, view):
        self.view = view
        for helper in self._instances.values():
            helper.set_view(view)
        return self

    def set_translator(self, translator, text_domain=None):
        self.translator = translator
        self.text_domain = text_domain
        for helper in self._instances.values():
            helper.set_translator(translator, text_domain)
        return self

    def _create(self, key, factory):
        helper = factory()
        logger.debug("Created helper %s for %s", type(helper).__name__, key)
        if self.view is not None:
            helper.set_view(self.view)
        if self.translator is not None or self.text_domain is not None:
            helper.set_translator(self.translator, self.text_domain)
        return helper
