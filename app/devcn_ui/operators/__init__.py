"""External tool operators.

This module provides the package managers used to install npm dependencies
(npm, pnpm, yarn) and the shadcn scaffolding tool operator.
"""

from devcn_ui.operators.base import PackageManager
from devcn_ui.operators.npm import NpmManager
from devcn_ui.operators.pnpm import PnpmManager
from devcn_ui.operators.shadcn import ScaffoldInvocationFailure, ShadcnOperator
from devcn_ui.operators.yarn import YarnManager

__all__ = [
    "NpmManager",
    "PackageManager",
    "PnpmManager",
    "ScaffoldInvocationFailure",
    "ShadcnOperator",
    "YarnManager",
]
