# models/__init__.py

from .role import Role
from .users import User
