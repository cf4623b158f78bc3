"""
SSM Parameter Migration Utility

A tool for copying AWS Systems Manager parameters from an old naming
hierarchy to a new one, preserving value, type and description.
"""

from .param_copy import ParamCopy
from .parameter_store import SSMParameterStore

__version__ = '0.1.0'
__all__ = ['ParamCopy', 'SSMParameterStore']
