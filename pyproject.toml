[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sdltour"
version = "0.1.0"
description = "A small 2D toolkit on pygame (sprites, colliders, sounds, text) with a series of runnable demos."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["pygame", "game", "2d", "sprites", "collision", "demos"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sdltour-surface = "sdltour.demos.surface:main"
sdltour-render-draw = "sdltour.demos.render_draw:main"
sdltour-texture = "sdltour.demos.texture:main"
sdltour-color-key = "sdltour.demos.color_key:main"
sdltour-blending = "sdltour.demos.blending:main"
sdltour-scrolling = "sdltour.demos.scrolling:main"
sdltour-fonts = "sdltour.demos.fonts:main"
sdltour-images = "sdltour.demos.images:main"
sdltour-texture-class = "sdltour.demos.texture_class:main"
sdltour-sprite-animation = "sdltour.demos.sprite_animation:main"
sdltour-rect-collision = "sdltour.demos.rect_collision:main"
sdltour-rotate-texture = "sdltour.demos.rotate_texture:main"

[tool.hatch.build.targets.wheel]
packages = ["sdltour"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
