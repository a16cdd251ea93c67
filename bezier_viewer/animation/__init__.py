from .run import DEFAULT_STEPS, AnimationFrame, AnimationRun, RunToken, animation_frames

__all__ = [
    "DEFAULT_STEPS",
    "AnimationFrame",
    "AnimationRun",
    "RunToken",
    "animation_frames",
]
