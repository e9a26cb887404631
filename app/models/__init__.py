from app.models.workout import WorkoutSession, ActivityDetail

__all__ = ["WorkoutSession", "ActivityDetail"]
