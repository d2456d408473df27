from pydantic import BaseModel, Field


class Testimonial(BaseModel):
    name: str = Field(default=..., description="Customer name")
    quote: str = Field(default=..., description="Testimonial text")
    rating: float = Field(default=..., description="Rating", ge=0, le=5)
    image: str | None = Field(default=None, description="Avatar URL")
