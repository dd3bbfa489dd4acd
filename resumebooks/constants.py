"""Answer options for the resume book submission form."""

RESUME_BOOK_CODING_LANGUAGES = (
    "C",
    "C++",
    "C#",
    "Go",
    "Java",
    "JavaScript",
    "Kotlin",
    "Matlab",
    "Objective-C",
    "PHP",
    "Python",
    "R",
    "Ruby",
    "Rust",
    "Scala",
    "Solidity",
    "SQL",
    "Swift",
    "TypeScript",
)

RESUME_BOOK_ROLES = (
    "Software Engineer",
    "Data Science",
    "Machine Learning",
    "Product Management",
    "Product Design",
    "Hardware Engineer",
    "Cybersecurity",
    "Quantitative Finance",
    "Other",
)

RESUME_BOOK_JOB_SEARCH_STATUSES = (
    "I am actively searching for a position.",
    "I am not searching for a position, but I am open to opportunities.",
    "I am not open to any opportunities.",
)


def as_choices(values):
    """Turn a tuple of labels into Django ``choices``."""
    return tuple((value, value) for value in values)
