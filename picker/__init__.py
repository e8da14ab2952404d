# picker/__init__.py
# This file is part of Sentential - A Propositional Logic Toolkit
#
# Short truth table picker exports

from .assignment import Assignment
from .console import run_picker

__all__ = ["Assignment", "run_picker"]
