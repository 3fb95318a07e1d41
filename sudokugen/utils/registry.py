import traceback
from typing import Any, Optional, Type

from sudokugen.utils.log import get_logger


class Registry(object):
    """A class for registry."""

    def __init__(self, name: str, default_mapping: Optional[dict] = None):
        """
        Args:
            name (`str`): The name of the registry.
            default_mapping (`Optional[dict]`): Default mapping from module names to
                module paths (strings).
        """
        self._name = name
        self._modules = {}
        self._default_mapping = default_mapping or {}
        self.logger = get_logger(__name__)

    @property
    def name(self) -> str:
        return self._name

    @property
    def modules(self) -> dict:
        """
        Get all modules registered so far. Entries of the default mapping only
        show up here after their first `get`.
        """
        return self._modules

    def names(self) -> list:
        """All names that `get` can resolve without a dotted path."""
        return sorted(set(self._default_mapping) | set(self._modules))

    def get(self, module_key) -> Any:
        """
        Get the module registered as `module_key`.

        Lookup order: registered modules, the default mapping, then
        `module_key` itself treated as a dotted import path
        (e.g. `my_package.my_module.MyCheck`).

        Args:
            module_key (`str`): specified module name

        Returns:
            `Any`: the module object, or None for a None key.
        """
        module = self._modules.get(module_key, None)
        if module is None:
            if module_key in self._default_mapping:
                module_path, class_name = self._default_mapping[module_key].rsplit(".", 1)
                module = self._import_or_raise(module_path, class_name)
                self._register_module(module_name=module_key, module_cls=module)
            elif isinstance(module_key, str) and "." in module_key:
                module_path, class_name = module_key.rsplit(".", 1)
                module = self._import_or_raise(module_path, class_name)
                self._register_module(module_name=module_key, module_cls=module)
            elif module_key is None:
                self.logger.info("Empty module key, return None")
                return None
            else:
                raise ValueError(
                    f"Invalid {self._name} key: {module_key}, "
                    f"expected one of {self.names()} or a dotted path"
                )
        return module

    def _import_or_raise(self, module_path: str, class_name: str) -> Type:
        try:
            return self._dynamic_import(module_path, class_name)
        except Exception:
            self.logger.error(
                f"Failed to dynamically import {class_name} from {module_path}:\n"
                + traceback.format_exc()
            )
            raise ImportError(f"Cannot dynamically import {class_name} from {module_path}")

    def _register_module(self, module_name=None, module_cls=None, force=False):
        if module_name is None:
            module_name = module_cls.__name__

        if module_name in self._modules and not force:
            if self._modules[module_name] is module_cls:
                return
            self.logger.warning(
                f"{module_name} is already registered in {self._name}, "
                f"if you want to override it, please set force=True."
            )
            raise KeyError(f"{module_name} is already registered in {self._name}")

        self._modules[module_name] = module_cls
        module_cls._name = module_name

    def register_module(self, module_name: str, module_cls: Type = None, force=False):
        """
        Register module class object to registry with the specified module name.

        Args:
            module_name (`str`): The module name.
            module_cls (`Type`): module class object
            force (`bool`): Whether to override an existing class with
                    the same name. Default: False.

        Example:

            .. code-block:: python

                @SOLVABILITY_CHECKS.register_module("my_check")
                class MyCheck(SolvabilityCheck):
                    pass

                # or register a module directly
                SOLVABILITY_CHECKS.register_module("my_check", module_cls=MyCheck, force=True)
        """
        if not (module_name is None or isinstance(module_name, str)):
            raise TypeError(f"module_name must be either of None, str," f"got {type(module_name)}")
        if module_cls is not None:
            self._register_module(module_name=module_name, module_cls=module_cls, force=force)
            return module_cls

        # if module_cls is None, should return a decorator function
        def _register(module_cls):
            self._register_module(module_name=module_name, module_cls=module_cls, force=force)
            return module_cls

        return _register

    def _dynamic_import(self, module_path: str, class_name: str) -> Type:
        import importlib

        module = importlib.import_module(module_path)
        module_cls = getattr(module, class_name)
        return module_cls
