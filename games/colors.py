"""RGB colors shared by the simulation and the renderer."""

RAYWHITE = (245, 245, 245)
LIGHTGRAY = (200, 200, 200)
GRAY = (130, 130, 130)
BLUE = (0, 121, 241)
DARKBLUE = (0, 82, 172)
SKYBLUE = (102, 191, 255)

HEAD_COLOR = DARKBLUE
BODY_COLOR = BLUE
FRUIT_COLOR = SKYBLUE
