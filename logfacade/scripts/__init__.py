# logfacade/scripts/__init__.py
from .get_project_root import *
