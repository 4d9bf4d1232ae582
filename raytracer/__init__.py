"""
Whitted-style ray tracer: affine transforms, shape hierarchy and recursive shading
"""
__version__ = "1.0.0"
