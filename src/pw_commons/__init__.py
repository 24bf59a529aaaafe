"""
pw_commons – password protection shared library.

Import path convention::

    from pw_commons.security import PasswordProtector, SecureRandomSource
    from pw_commons.security.passwords import PasswordGenerator, ProtectedPassword
    from pw_commons.config import EnvSettingsLoader
    from pw_commons.kernel.errors import ValidationError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
