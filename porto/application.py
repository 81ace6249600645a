"""
Framework Application Class
Service container and provider lifecycle
"""
from typing import Dict, List, Any, Optional
import inspect
import sys

from porto.exceptions import BindingResolutionException


class Application:
    """Main application class - service container and provider lifecycle"""

    def __init__(self, base_path: Optional[str] = None):
        from porto.support import Storage

        Storage.initialize(base_path)
        self.base_path = str(Storage.base())

        self.providers: List[Any] = []
        self.booted = False
        self.bindings: Dict[str, Any] = {}

        self.singleton('app', self)

        # Add base path to Python path so the 'app' package is importable
        if self.base_path not in sys.path:
            sys.path.insert(0, self.base_path)

    def singleton(self, key: str, factory_or_instance):
        """
        Register a singleton binding (Laravel-style container)
        If factory: Will be called once with the application and cached
        If class: Will be built once through the container and cached
        If instance: Will be stored directly
        """
        if inspect.isfunction(factory_or_instance) or inspect.ismethod(factory_or_instance):
            self.bindings[key] = {'type': 'singleton', 'factory': factory_or_instance, 'instance': None, 'resolved': False}
        elif inspect.isclass(factory_or_instance):
            concrete = factory_or_instance
            self.bindings[key] = {'type': 'singleton', 'factory': lambda app: app.build(concrete), 'instance': None, 'resolved': False}
        else:
            self.bindings[key] = {'type': 'singleton', 'factory': None, 'instance': factory_or_instance, 'resolved': True}

    def bind(self, key: str, factory: callable):
        """Register a factory binding (called every time)"""
        if inspect.isclass(factory):
            concrete = factory
            factory = lambda app: app.build(concrete)
        self.bindings[key] = {'type': 'factory', 'factory': factory}

    def make(self, key: str) -> Any:
        """
        Resolve a binding from the container

        Unbound keys are treated as dotted class paths and built on the fly,
        so 'app.containers.Siteapp.Actions.SwitchTemplateAction' resolves to a
        fresh SwitchTemplateAction instance.

        Raises:
            BindingResolutionException: If the key is neither bound nor a loadable class
        """
        if key not in self.bindings:
            return self.build(self._load_class(key))

        binding = self.bindings[key]

        if binding['type'] == 'singleton':
            if not binding['resolved']:
                binding['instance'] = binding['factory'](self)
                binding['resolved'] = True
            return binding['instance']

        return binding['factory'](self)

    def build(self, concrete: type) -> Any:
        """
        Instantiate a class, injecting constructor dependencies

        Parameters annotated with Application receive the container itself;
        parameters named after a bound key receive make(name). Parameters
        with defaults are otherwise left to their defaults.
        """
        try:
            signature = inspect.signature(concrete)
        except (TypeError, ValueError):
            return concrete()

        kwargs = {}
        for name, param in signature.parameters.items():
            if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
                continue

            if param.annotation is Application or param.annotation == 'Application':
                kwargs[name] = self
            elif name in self.bindings:
                kwargs[name] = self.make(name)
            elif param.default is inspect.Parameter.empty:
                raise BindingResolutionException(
                    f"Unresolvable dependency '{name}' in class {concrete.__qualname__}"
                )

        return concrete(**kwargs)

    def _load_class(self, key: str) -> type:
        from porto.support.class_loader import ClassLoader, ClassMissingError, ModuleMissingError

        try:
            concrete = ClassLoader.load(key)
        except (ModuleMissingError, ClassMissingError) as e:
            raise BindingResolutionException(f"Binding '{key}' not found in container") from e

        if not inspect.isclass(concrete):
            raise BindingResolutionException(f"Binding '{key}' is not a class")

        return concrete

    def has(self, key: str) -> bool:
        """
        Check if a binding exists in the container
        """
        return key in self.bindings

    def get_bindings(self) -> Dict[str, Dict[str, Any]]:
        """
        Get all container bindings with their type and instantiation state
        """
        result = {}
        for key, binding in self.bindings.items():
            result[key] = {
                'type': binding['type'],
                'instantiated': binding['resolved'] if binding['type'] == 'singleton' else None
            }
        return result

    def list_bindings(self) -> str:
        """
        Get a formatted list of all container bindings
        """
        bindings = self.get_bindings()

        singletons = []
        factories = []

        for key, info in bindings.items():
            if info['type'] == 'singleton':
                status = 'instantiated' if info['instantiated'] else 'lazy'
                singletons.append(f"  {key:<30} [{status}]")
            else:
                factories.append(f"  {key:<30} [new instance each call]")

        output = []

        if singletons:
            output.append("Singletons:")
            output.extend(sorted(singletons))

        if factories:
            if output:
                output.append("")
            output.append("Factories (bind):")
            output.extend(sorted(factories))

        return "\n".join(output)

    def register_provider(self, provider_class):
        """Register a service provider"""
        provider = provider_class(self)
        register = provider.register()
        if register is not False:
            self.providers.append(provider)
        return provider

    def boot(self):
        """Boot all service providers"""
        if self.booted:
            return

        for provider in self.providers:
            provider.boot()

        self.booted = True
