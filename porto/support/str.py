"""
String Helper Functions
Laravel-style string manipulation utilities
"""
import re
from typing import List


class Str:
    """
    String manipulation helper class (Laravel-style)

    Provides static methods for the naming conventions the caller relies on:
    - ucfirst (container names)
    - PascalCase splitting (class types)
    - snake_case / StudlyCase conversion (module file names)
    """

    @staticmethod
    def ucfirst(value: str) -> str:
        """
        Upper-case the first character, leave the rest untouched

        Example:
            Str.ucfirst('siteapp')  # 'Siteapp'
            Str.ucfirst('userProfile')  # 'UserProfile'
        """
        if not value:
            return value

        return value[0].upper() + value[1:]

    @staticmethod
    def split_pascal(value: str) -> List[str]:
        """
        Split a PascalCase string before every upper-case letter

        Empty segments are dropped.

        Example:
            Str.split_pascal('SwitchTemplateAction')  # ['Switch', 'Template', 'Action']
            Str.split_pascal('Action')  # ['Action']
        """
        if not value:
            return []

        return [segment for segment in re.split(r'(?=[A-Z])', value) if segment]

    @staticmethod
    def snake(value: str, delimiter: str = '_') -> str:
        """
        Convert a string to snake_case

        Args:
            value: String to convert
            delimiter: Delimiter to use (default: '_')

        Returns:
            Snake cased string

        Example:
            Str.snake('SwitchTemplateAction')  # 'switch_template_action'
            Str.snake('Framework App')  # 'framework_app'
        """
        if not value:
            return value

        # Replace spaces with delimiter
        value = value.replace(' ', delimiter)

        # Insert delimiter before uppercase letters
        value = re.sub('(.)([A-Z][a-z]+)', r'\1' + delimiter + r'\2', value)
        value = re.sub('([a-z0-9])([A-Z])', r'\1' + delimiter + r'\2', value)

        # Lowercase and remove duplicate delimiters
        value = value.lower()
        value = re.sub(f'{delimiter}+', delimiter, value)

        return value.strip(delimiter)

    @staticmethod
    def studly(value: str) -> str:
        """
        Convert a string to StudlyCase (PascalCase)

        Example:
            Str.studly('switch_template_action')  # 'SwitchTemplateAction'
        """
        if not value:
            return value

        value = value.replace('_', ' ').replace('-', ' ')

        return ''.join(word.capitalize() for word in value.split())
