# Copyright (C) The redefine developers

"""
The unit test package for redefine.
"""
