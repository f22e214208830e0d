"""Monte Carlo path tracer with importance sampling, BVH acceleration, textures and OBJ meshes."""

__version__ = "1.1.0"