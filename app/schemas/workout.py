from pydantic import BaseModel
from typing import Optional, Dict, Any

class WorkoutCreate(BaseModel):
    # Все поля опциональны: обязательность проверяет эндпоинт и отвечает 400, а не 422
    workout_date: Optional[str] = None
    workout_type: Optional[str] = None
    duration_minutes: Optional[int] = None
    active_calories: Optional[int] = None
    notes: Optional[str] = None
    distance_miles: Optional[float] = None
    calories_segment: Optional[int] = None

    def has_required_fields(self) -> bool:
        # duration_minutes=0 и active_calories=0 считаются переданными
        return bool(
            self.workout_date
            and self.workout_type
            and self.duration_minutes is not None
            and self.active_calories is not None
        )

    def session_fields(self) -> Dict[str, Any]:
        return {
            "workout_date": self.workout_date,
            "workout_type": self.workout_type,
            "duration_minutes": self.duration_minutes,
            "active_calories": self.active_calories,
            "notes": self.notes,
        }

class WorkoutUpdate(BaseModel):
    """Частичное обновление: поле меняется, только если клиент прислал не-null значение."""
    workout_date: Optional[str] = None
    workout_type: Optional[str] = None
    duration_minutes: Optional[int] = None
    active_calories: Optional[int] = None
    notes: Optional[str] = None

    def provided_fields(self) -> Dict[str, Any]:
        # "" и 0 - валидные новые значения, отсутствие или null оставляют старое
        return {
            name: getattr(self, name)
            for name in self.model_fields_set
            if getattr(self, name) is not None
        }

class WorkoutRow(BaseModel):
    id: int
    workout_date: str
    workout_type: str
    duration_minutes: int
    active_calories: int
    notes: Optional[str] = None
    distance_miles: Optional[float] = None
    calories_segment: Optional[int] = None

    class Config:
        from_attributes = True

class WorkoutCreated(BaseModel):
    message: str
    id: int
    details_created: bool

class WorkoutMessage(BaseModel):
    message: str
    id: int

class HealthResponse(BaseModel):
    ok: bool
    message: str
