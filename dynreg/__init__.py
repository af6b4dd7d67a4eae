"""dynreg.
~~~~~~

Client side of OAuth 2.0 Dynamic Client Registration Management.
"""

from .consts import author
from .consts import homepage
from .consts import version

__version__ = version
__homepage__ = homepage
__author__ = author
__license__ = "BSD-3-Clause"
