"""
Class Loader
Dynamic class loading utility for importing classes from dotted paths
"""
import importlib
import inspect
from types import ModuleType
from typing import Type


class ModuleMissingError(ImportError):
    """None of the candidate modules for a class path exist"""


class ClassMissingError(AttributeError):
    """The candidate module exists but does not define the class"""


class ClassLoader:
    """
    Utility for dynamically loading classes from string paths

    A dotted path 'app.containers.Siteapp.Actions.SwitchTemplateAction' is
    looked up, in order, as:
        1. SwitchTemplateAction exported by app.containers.Siteapp.Actions
        2. class SwitchTemplateAction in module .../Actions/SwitchTemplateAction.py
        3. class SwitchTemplateAction in module .../Actions/switch_template_action.py

    Errors raised while executing a found module (a bad import inside the
    handler, a syntax error, ...) propagate unchanged.

    Example:
        cls = ClassLoader.load('app.containers.Siteapp.Actions.SwitchTemplateAction')
        instance = cls()
    """

    @staticmethod
    def load(class_path: str) -> Type:
        """
        Load a class from a dotted path string

        Args:
            class_path: Full dotted path to class

        Returns:
            The class object (not instantiated)

        Raises:
            ModuleMissingError: If no candidate module exists
            ClassMissingError: If the class doesn't exist in any candidate module
        """
        if '.' not in class_path:
            raise ModuleMissingError(f"'{class_path}' is not a dotted class path")

        # Split module path and class name
        module_path, class_name = class_path.rsplit('.', 1)

        module = ClassLoader._import(module_path)
        if module is None:
            raise ModuleMissingError(f"No module named '{module_path}'", name=module_path)

        target = getattr(module, class_name, None)

        # Module file named after the class: app/.../Actions/SwitchTemplateAction.py
        if isinstance(target, ModuleType):
            return ClassLoader._class_from(target, class_name)

        if target is not None:
            return target

        # Snake-cased module file: app/.../Actions/switch_template_action.py
        from porto.support.str import Str
        for module_name in (class_name, Str.snake(class_name)):
            submodule = ClassLoader._import(f'{module_path}.{module_name}')
            if submodule is not None:
                return ClassLoader._class_from(submodule, class_name)

        raise ClassMissingError(f"Module '{module_path}' has no class '{class_name}'")

    @staticmethod
    def exists(class_path: str) -> bool:
        """
        Check whether a dotted path names a loadable class

        Only a missing candidate module or a missing class counts as
        "does not exist"; anything raised by the module itself propagates.

        Args:
            class_path: Full dotted path to class

        Returns:
            bool: True if the path resolves to a class
        """
        try:
            return inspect.isclass(ClassLoader.load(class_path))
        except (ModuleMissingError, ClassMissingError):
            return False

    @staticmethod
    def _import(module_path: str):
        """Import module_path, or return None when it (or a parent package) does not exist"""
        try:
            return importlib.import_module(module_path)
        except ModuleNotFoundError as e:
            if e.name and (e.name == module_path or module_path.startswith(e.name + '.')):
                return None
            raise

    @staticmethod
    def _class_from(module: ModuleType, class_name: str) -> Type:
        try:
            return getattr(module, class_name)
        except AttributeError:
            raise ClassMissingError(
                f"Module '{module.__name__}' has no class '{class_name}'"
            ) from None
