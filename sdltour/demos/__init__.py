"""Runnable demos of drawing, blending, text, sprites, collision and rotation."""