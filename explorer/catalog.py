"""Static catalog of the lessons, guides and resources shipped with the guide.

Titles are what the report shows; file names are checked against the
matching base directory. Order here is the order of the report.
"""

from __future__ import annotations

from typing import Iterable, Tuple

from .types import Catalog, CatalogEntry, Phase


def _entries(pairs: Iterable[Tuple[str, str]]) -> Tuple[CatalogEntry, ...]:
    return tuple(CatalogEntry(title=title, file_name=file_name) for title, file_name in pairs)


PHASES: Tuple[Phase, ...] = (
    Phase(
        name="Phase 1: Foundations 🏗️",
        entries=_entries(
            [
                ("Lesson 0: Computer Basics", "Lesson 00_ Computer Basics.md"),
                ("Lesson 0.5: Internet Concepts", "Lesson 00.5_ Internet Concepts.md"),
                ("Lesson 0.75: Git and GitHub", "Lesson 00.75_ Git and GitHub.md"),
                (
                    "Lesson 1: Introduction to Web Development",
                    "Lesson 01_ Introduction to Web Development.md",
                ),
                ("Lesson 2: HTML Basics", "Lesson 02_ HTML Basics.md"),
                ("Lesson 3: CSS Basics", "Lesson 03_ CSS Basics.md"),
                ("Lesson 4: JavaScript Basics", "Lesson 04_ JavaScript Basics.md"),
            ]
        ),
    ),
    Phase(
        name="Phase 2: Backend Development ⚙️",
        entries=_entries(
            [
                (
                    "Lesson 5: Backend Development and Node.js",
                    "Lesson 05_ Backend Development and Node.js.md",
                ),
                ("Lesson 6: Express.js", "Lesson 06_ Express.js.md"),
                ("Lesson 7: Databases and MongoDB", "Lesson 07_ Databases and MongoDB.md"),
                ("Lesson 8: Mongoose", "Lesson 08_ Mongoose.md"),
            ]
        ),
    ),
    Phase(
        name="Phase 3: Frontend Frameworks ⚛️",
        entries=_entries(
            [
                ("Lesson 9: React Basics", "Lesson 09_ React Basics.md"),
                ("Lesson 10: React Hooks", "Lesson 10_ React Hooks.md"),
                ("Lesson 11: React Router", "Lesson 11_ React Router.md"),
                ("Lesson 12: Redux", "Lesson 12_ Redux.md"),
            ]
        ),
    ),
    Phase(
        name="Phase 4: Advanced Topics 🚀",
        entries=_entries(
            [
                (
                    "Lesson 13: Authentication & Authorization",
                    "Lesson 13_ Authentication & Authorization.md",
                ),
                (
                    "Lesson 14: Testing - Unit, Integration & E2E",
                    "Lesson 14_ Testing - Unit, Integration & E2E.md",
                ),
                ("Lesson 15: Deployment & DevOps", "Lesson 15_ Deployment & DevOps.md"),
                (
                    "Lesson 16: Full-Stack Development Roadmap & Best Practices",
                    "Lesson 16_ Full-Stack Development Roadmap & Best Practices.md",
                ),
            ]
        ),
    ),
    Phase(
        name="Phase 5: Specialized Topics 🎯",
        entries=_entries(
            [
                ("Lesson 17: API Design and GraphQL", "Lesson 17_ API Design and GraphQL.md"),
                (
                    "Lesson 18: Real-Time Applications with WebSockets",
                    "Lesson 18_ Real-Time Applications with WebSockets.md",
                ),
            ]
        ),
    ),
)

GUIDES: Tuple[CatalogEntry, ...] = _entries(
    [
        ("Advanced JavaScript Guide", "Advanced_JavaScript_Guide.md"),
        ("Advanced React Guide", "Advanced_React_Guide.md"),
        ("Advanced Topics Guide", "Advanced_Topics_Guide.md"),
        ("API Calling & HTTP Methods Guide", "API_Calling_HTTP_Methods_Guide.md"),
        ("Backend Technologies", "Backend_Technologies.md"),
        ("Database Technologies", "Database_Technologies.md"),
        ("DevOps Deployment", "DevOps_Deployment.md"),
        ("Frontend Technologies", "Frontend_Technologies.md"),
        ("Postman API Testing Guide", "Postman_API_Testing_Guide.md"),
        ("Programming Languages Guide", "Programming_Languages_Guide.md"),
        ("Tools & Frameworks", "Tools_Frameworks.md"),
        ("Website Libraries & Framework Guide", "Website_Libraries_Framework_Guide.md"),
    ]
)

RESOURCES: Tuple[CatalogEntry, ...] = _entries(
    [
        ("Career Best Practices", "Career_Best_Practices.md"),
        (
            "Code Examples & Practical Implementations",
            "Code_Examples_Practical_Implementations.md",
        ),
        ("Learning Paths & Skill Trees", "Learning_Paths_Skill_Trees.md"),
    ]
)

CATALOG = Catalog(phases=PHASES, guides=GUIDES, resources=RESOURCES)
