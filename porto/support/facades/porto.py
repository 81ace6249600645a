"""
Porto Facade
Provides static access to the container caller
"""
from porto.support.facades.facade import Facade


class Porto(Facade):
    """
    Porto Facade

    Example:
        Porto.call('Siteapp@SwitchTemplateAction', [apply_id, template_id])
        Porto.call('User@RegisterUserAction', [data], ['validate', {'set_locale': 'en'}])
    """

    @classmethod
    def get_facade_accessor(cls) -> str:
        from porto.defaults import DEFAULT_PORTO_BINDING
        return DEFAULT_PORTO_BINDING
