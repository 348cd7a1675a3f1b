from .options import SlugOptions
