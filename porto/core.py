"""
Porto Core
Resolves "Container@ClassName" callers to container classes and runs them

Usage:
    Porto.call('Siteapp@SwitchTemplateAction', [apply_id, template_id])

All business logic lives under app/containers and must follow the naming
convention. For the example above the class is expected at:

    app/containers/Siteapp/Actions/SwitchTemplateAction.py

The type folder (Actions) is the last PascalCase word of the class name
plus an 's': SwitchTemplateAction -> Action -> Actions.
"""
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from porto.defaults import (
    DEFAULT_CALLER_SEPARATOR,
    DEFAULT_CONTAINERS_DIRECTORY,
    DEFAULT_ROOT_NAMESPACE,
    DEFAULT_RUN_METHOD,
)
from porto.exceptions import (
    ClassDoesNotExistException,
    InvalidCallerStyleException,
    MissingContainerException,
)
from porto.logging import getLogger
from porto.support import ClassLoader, Storage, Str

logger = getLogger(__name__)

ExtraMethod = Union[str, Dict[str, Any]]


class Core:
    """
    Container caller

    Args:
        container: Instantiation collaborator exposing make(key), usually the Application
        app_path: Application root holding the containers/ directory (defaults to Storage.app())
        root_namespace: Root package of the containers (defaults to 'app')
        separator: Separator between container and class name (defaults to '@')
    """

    def __init__(
        self,
        container,
        app_path: Optional[Union[str, Path]] = None,
        root_namespace: Optional[str] = None,
        separator: str = DEFAULT_CALLER_SEPARATOR
    ):
        self.container = container
        self.app_path = Path(app_path) if app_path is not None else Storage.app()
        self.root_namespace = root_namespace or DEFAULT_ROOT_NAMESPACE
        self.separator = separator

    def call(
        self,
        class_name: str,
        run_arguments: Optional[Sequence[Any]] = None,
        extra_methods: Optional[Sequence[ExtraMethod]] = None
    ) -> Any:
        """
        Resolve a class, call its extra methods, then return its run() result

        Args:
            class_name: 'Container@ClassName' or a plain container key / class path
            run_arguments: Positional arguments for run()
            extra_methods: Methods to call before run(), e.g. ['init', {'configure': [1, 2]}]

        Returns:
            Whatever run() returns

        Example:
            core.call('Siteapp@SwitchTemplateAction', [42, 7])
        """
        instance = self.resolve_class(class_name)

        self.call_extra_methods(instance, extra_methods or [])

        return getattr(instance, DEFAULT_RUN_METHOD)(*(run_arguments or []))

    def resolve_class(self, class_name: str) -> Any:
        """
        Resolve a caller string to an instance from the container

        Raises:
            InvalidCallerStyleException: If the caller does not split into container and class
            MissingContainerException: If the container directory does not exist
            ClassDoesNotExistException: If the composed class cannot be loaded
        """
        if self.needs_parsing(class_name):
            container_raw, short_name = self.parse_class_name(class_name)
            container_name = Str.ucfirst(container_raw)

            self.verify_container_exist(container_name)
            class_name = self.build_class_full_name(container_name, short_name)
            self.verify_class_exist(class_name)
        else:
            logger.debug(
                'It is recommended to use the caller style (containerName@className) for %s',
                class_name
            )

        return self.container.make(class_name)

    def verify_container_exist(self, container_name: str):
        """Raise MissingContainerException unless <app_path>/containers/<container_name> is a directory"""
        if not Storage.directory_exists(self.app_path / DEFAULT_CONTAINERS_DIRECTORY / container_name):
            raise MissingContainerException(f"Container ({container_name}) is not installed.")

    def verify_class_exist(self, class_name: str):
        """Raise ClassDoesNotExistException unless class_name is a loadable class path"""
        if not ClassLoader.exists(class_name):
            raise ClassDoesNotExistException(f"Class ({class_name}) is not installed.")

    def build_class_full_name(self, container_name: str, class_name: str) -> str:
        """
        Build the dotted class path of a container class

        Example:
            core.build_class_full_name('Siteapp', 'SwitchTemplateAction')
            # 'app.containers.Siteapp.Actions.SwitchTemplateAction'
        """
        return '.'.join([
            self.root_namespace,
            DEFAULT_CONTAINERS_DIRECTORY,
            container_name,
            self.get_class_type(class_name) + 's',
            class_name,
        ])

    def get_class_type(self, class_name: str) -> str:
        """
        Get the class type: the last PascalCase word of the class name

        The naming convention must be followed strictly for this to work.

        Example:
            core.get_class_type('SwitchTemplateAction')  # 'Action'
        """
        segments = Str.split_pascal(class_name)
        return segments[-1] if segments else ''

    def call_extra_methods(self, instance: Any, extra_methods: Sequence[ExtraMethod]):
        """
        Call extra methods on the instance in order, before run()

        A string calls the method without arguments; a dict maps method names
        to their arguments. Methods missing on the instance are skipped.
        """
        for method_info in extra_methods:
            if isinstance(method_info, dict):
                for method, arguments in method_info.items():
                    self._call_method(instance, method, self._as_arguments(arguments))
            else:
                self._call_method(instance, method_info, [])

    def needs_parsing(self, class_name: str) -> bool:
        """Check whether the caller uses the 'Container@ClassName' style"""
        return self.separator in class_name

    def parse_class_name(self, class_name: str) -> List[str]:
        """
        Split 'Container@ClassName' into [container, class name]

        Raises:
            InvalidCallerStyleException: On more than one separator or an empty part
        """
        parts = class_name.split(self.separator)

        if len(parts) != 2 or not all(parts):
            raise InvalidCallerStyleException(
                f"Invalid caller style ({class_name}), expected containerName{self.separator}className."
            )

        return parts

    @staticmethod
    def _call_method(instance: Any, method: str, arguments: List[Any]):
        handler = getattr(instance, method, None)
        if callable(handler):
            handler(*arguments)

    @staticmethod
    def _as_arguments(arguments: Any) -> List[Any]:
        if arguments is None:
            return []
        if isinstance(arguments, (list, tuple)):
            return list(arguments)
        return [arguments]
