"""
Framework Helper Functions
User-facing shortcuts
"""
from typing import Any, Optional, Sequence


def porto_call(
    class_name: str,
    run_arguments: Optional[Sequence[Any]] = None,
    extra_methods: Optional[Sequence[Any]] = None
) -> Any:
    """
    Call a container class through the Porto facade

    Example:
        porto_call('Siteapp@SwitchTemplateAction', [apply_id, template_id])
    """
    from porto.support.facades import Porto

    return Porto.call(class_name, run_arguments, extra_methods)
