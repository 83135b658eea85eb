# -*- encoding: utf-8 -*-

"""A ray caster with Phong shading and hard shadows"""

__version__ = "0.1.0"
