"""
devos - Odoo developer operation system
"""

__version__ = "0.1.0"

from .errors import DevosError
from .models import ProjectConfig

__all__ = ["DevosError", "ProjectConfig"]
