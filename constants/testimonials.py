from schemas import Testimonial

TESTIMONIALS = [
    Testimonial(
        name="Priya Raman",
        quote="The butter chicken tastes like home. Pickup was ready right on time.",
        rating=5,
    ),
    Testimonial(
        name="Marcus Bell",
        quote="Generous portions and the tofu curry is a real standout.",
        rating=4.5,
    ),
    Testimonial(
        name="Elena Duarte",
        quote="Ordering online was painless and the naan arrived still warm.",
        rating=4,
    ),
    Testimonial(
        name="Tom Okafor",
        quote="Great spice levels, friendly staff, will be back next week.",
        rating=4.5,
    ),
    Testimonial(
        name="Hannah Cho",
        quote="Our go-to place for family dinners. The lamb biryani is perfect.",
        rating=5,
    ),
]
