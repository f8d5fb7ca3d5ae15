import zlib
from typing import Any, Dict, Mapping

from interviewace.questions.bank import QUESTION_BANK, Question

EMERGENCY_QUESTION = {
    "id": "fallback-1",
    "text": "Tell me about yourself and your experience with software development.",
    "is_greeting": False,
    "metadata": {"category": "behavioral", "role": "general", "difficulty": "easy"},
}

GREETINGS = {
    "technical": [
        "{hello} I'm Zen AI, your InterviewAce assistant. Welcome to your {difficulty} technical interview for a {role} position. I'll be asking you questions to evaluate your technical knowledge and problem-solving skills.",
        "{hi} I'm Zen AI from InterviewAce. Ready for your {role} technical interview? We'll cover {difficulty} level questions to assess your technical expertise.",
        "{welcome} I'm Zen AI, and let's begin your technical interview. I'll be evaluating your {role} skills with some {difficulty} questions.",
    ],
    "behavioral": [
        "{hello} I'm Zen AI, your InterviewAce assistant. Welcome to your behavioral interview for a {role} position. I'll be asking questions about your experience, teamwork, and problem-solving approach.",
        "{hi} I'm Zen AI from InterviewAce. Ready to discuss your experience and working style? This behavioral interview will help us understand how you approach challenges.",
        "{welcome} I'm Zen AI, and let's talk about your professional experience and how you handle various workplace situations.",
    ],
    "system-design": [
        "{hello} I'm Zen AI, your InterviewAce assistant. Welcome to your system design interview. We'll discuss how you approach designing scalable systems and architecture decisions.",
        "{hi} I'm Zen AI from InterviewAce. Ready to design some systems? I'll be asking you to walk through architecture decisions and trade-offs.",
        "{welcome} I'm Zen AI, and let's explore your system design thinking and how you approach building large-scale applications.",
    ],
}


def _is_used(question: Question, used: set) -> bool:
    return question["id"] in used or question["text"] in used


def _as_response(question: Question) -> Dict[str, Any]:
    return {
        "id": question["id"],
        "text": question["text"],
        "is_greeting": False,
        "metadata": {
            "category": question["category"],
            "role": question["role"],
            "difficulty": question["difficulty"],
        },
    }


def get_next_question(request: Mapping[str, Any]) -> Dict[str, Any]:
    role = request["role"]
    interview_type = request["type"]
    difficulty = request["difficulty"]
    used = set(request.get("used_questions") or [])

    candidates = [
        q for q in QUESTION_BANK
        if (q["role"] == role or q["role"] == "general" or role == "general")
        and (q["category"] == interview_type or interview_type == "general")
        and q["difficulty"] == difficulty
        and not _is_used(q, used)
    ]
    if not candidates:
        candidates = [q for q in QUESTION_BANK if q["difficulty"] == difficulty and not _is_used(q, used)]
    if not candidates:
        candidates = [q for q in QUESTION_BANK if not _is_used(q, used)]

    if not candidates:
        return dict(EMERGENCY_QUESTION)
    return _as_response(candidates[0])


def get_greeting(config: Mapping[str, str], user_name: str | None = None) -> Dict[str, Any]:
    if user_name:
        prefixes = {"hello": f"Hello {user_name}!", "hi": f"Hi {user_name}!", "welcome": f"Welcome {user_name}!"}
    else:
        prefixes = {"hello": "Hello!", "hi": "Hi!", "welcome": "Welcome!"}

    templates = GREETINGS.get(config["type"], GREETINGS["technical"])
    template = templates[_stable_index(len(templates), config["role"], config["type"], config["difficulty"], user_name or "")]
    text = template.format(role=config["role"], difficulty=config["difficulty"], **prefixes)

    return {
        "id": "greeting",
        "text": f"{text} Let's start with our first question.",
        "is_greeting": True,
        "metadata": {
            "category": config["type"],
            "role": config["role"],
            "difficulty": config["difficulty"],
        },
    }


def _stable_index(size: int, *parts: str) -> int:
    return zlib.crc32("|".join(parts).encode("utf-8")) % size
