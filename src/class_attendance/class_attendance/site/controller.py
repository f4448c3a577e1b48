"""Public marketing and documentation pages."""
from __future__ import annotations

from flask import Flask, render_template

from ..container import Container

FEATURES = (
    {
        "title": "Student Management",
        "description": "Easily manage student profiles, track attendance history, and maintain comprehensive records.",
    },
    {
        "title": "Smart Calendar",
        "description": "Intuitive calendar interface for viewing and managing attendance across multiple classes.",
    },
    {
        "title": "Attendance Records",
        "description": "Filter records by class, student and date range, then export them to CSV.",
    },
    {
        "title": "Security & Privacy",
        "description": "Every teacher only ever sees the classes they created.",
    },
)

FAQ = (
    ("Is it free to use?", "Yes. Create an account and start taking attendance right away."),
    ("Can I export attendance?", "Yes. The Attendance Records page exports any filtered range as CSV."),
    ("What does 'unmarked' mean?", "Nobody has recorded the student as present or absent for that day yet."),
    ("Can I undo a mark?", "Set the student back to Unmarked and the stored mark is removed."),
)

DOC_SECTIONS = (
    ("Getting Started", ("Introduction", "Quick Start Guide", "Configuration")),
    ("Core Features", ("Attendance Tracking", "Student Management", "Calendar View", "Reports")),
    ("Resources", ("FAQ", "Support")),
)


def register(app: Flask, container: Container) -> None:
    @app.route("/", endpoint="home")
    def home():
        return render_template("site/home.html", features=FEATURES, faq=FAQ, active_page="home")

    @app.route("/docs", endpoint="docs")
    def docs():
        return render_template("site/docs.html", sections=DOC_SECTIONS, features=FEATURES, active_page="docs")
