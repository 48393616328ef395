# services/__init__.py

# This file makes the 'services' directory a Python package and
# exposes its modules for import.

from . import product_pipeline
from . import cart
from . import auth_session
