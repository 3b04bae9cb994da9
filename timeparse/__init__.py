"""Convert between unix timestamps and YYYY/MM/DD HH:MM:SS datetimes."""

__version__ = "0.1.0"
__description__ = "Convert between unix timestamps and formatted datetimes."
__license__ = "MIT"
__author__ = "Serghei Iakovlev"
__author_email__ = "oss@serghei.pl"
__copyright__ = f"Copyright (C) 2025 {__author__}"
