# Copyright (C) The redefine developers

__version__ = "1.0.0"
