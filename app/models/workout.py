from sqlalchemy import Column, Integer, String, Text, Float, ForeignKey
from sqlalchemy.orm import relationship
from app.core.base import Base

class WorkoutSession(Base):
    __tablename__ = "workout_sessions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    workout_date = Column(String, nullable=False)
    workout_type = Column(String, nullable=False)
    duration_minutes = Column(Integer, nullable=False)
    active_calories = Column(Integer, nullable=False)
    notes = Column(Text, nullable=True)

    # Удаление деталей выполняет сама БД (ON DELETE CASCADE)
    details = relationship(
        "ActivityDetail",
        back_populates="workout",
        uselist=False,
        passive_deletes=True,
    )

class ActivityDetail(Base):
    __tablename__ = "activity_details"

    id = Column(Integer, primary_key=True, autoincrement=True)
    workout_id = Column(
        Integer,
        ForeignKey("workout_sessions.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    distance_miles = Column(Float, nullable=True)
    calories_segment = Column(Integer, nullable=True)

    workout = relationship("WorkoutSession", back_populates="details")
