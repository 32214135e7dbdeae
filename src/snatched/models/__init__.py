from snatched.models.workout import Workout

__all__ = ["Workout"]
