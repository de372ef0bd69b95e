# logfacade/__init__.py
from .context_vars import *
