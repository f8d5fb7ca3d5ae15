from typing import List, Literal, Mapping, TypedDict

MAX_QUESTIONS = 6


class Question(TypedDict):
    id: str
    category: Literal["technical", "behavioral", "hr", "system-design"]
    role: Literal["frontend", "backend", "fullstack", "general"]
    difficulty: Literal["easy", "medium", "hard"]
    text: str


def _q(question_id: str, category: str, role: str, difficulty: str, text: str) -> Question:
    return {"id": question_id, "category": category, "role": role, "difficulty": difficulty, "text": text}


QUESTION_BANK: List[Question] = [
    _q("fe-easy-1", "technical", "frontend", "easy", "Can you explain the difference between var, let, and const in JavaScript?"),
    _q("fe-easy-2", "technical", "frontend", "easy", "What is the virtual DOM and how does it work in React?"),
    _q("fe-easy-3", "technical", "frontend", "easy", "How would you optimize the performance of a slow-loading web page?"),
    _q("fe-medium-1", "technical", "frontend", "medium", "Explain the concept of closures in JavaScript. Can you provide a practical use case?"),
    _q("fe-medium-2", "technical", "frontend", "medium", "How do you handle state management in a large React application? What libraries or patterns do you use?"),
    _q("fe-medium-3", "technical", "frontend", "medium", "What are Web Workers and when would you use them? Can you describe a scenario?"),
    _q("fe-hard-1", "technical", "frontend", "hard", "Explain how the JavaScript event loop works. How does it handle async operations, promises, and microtasks?"),
    _q("fe-hard-2", "technical", "frontend", "hard", "Design a solution for implementing infinite scroll with virtualization for a list of 100,000 items."),
    _q("be-easy-1", "technical", "backend", "easy", "What is the difference between SQL and NoSQL databases? When would you use each?"),
    _q("be-easy-2", "technical", "backend", "easy", "Explain what RESTful APIs are. What are the main HTTP methods and their purposes?"),
    _q("be-easy-3", "technical", "backend", "easy", "How do you handle authentication and authorization in your applications?"),
    _q("be-medium-1", "technical", "backend", "medium", "Explain database indexing. How does it improve performance and what are the trade-offs?"),
    _q("be-medium-2", "technical", "backend", "medium", "How would you design a rate limiting system for an API?"),
    _q("be-medium-3", "technical", "backend", "medium", "What strategies do you use for error handling and logging in production systems?"),
    _q("be-hard-1", "technical", "backend", "hard", "Design a distributed caching system that handles cache invalidation across multiple servers."),
    _q("be-hard-2", "technical", "backend", "hard", "Explain database transactions and ACID properties. How would you handle a distributed transaction?"),
    _q("fs-easy-1", "technical", "fullstack", "easy", "Walk me through how a web request travels from the browser to the server and back."),
    _q("fs-easy-2", "technical", "fullstack", "easy", "What is CORS and why is it important? How do you handle it in your applications?"),
    _q("fs-easy-3", "technical", "fullstack", "easy", "Explain the difference between server-side rendering and client-side rendering."),
    _q("fs-medium-1", "technical", "fullstack", "medium", "How would you implement real-time features in a web application (like live chat or notifications)?"),
    _q("fs-medium-2", "technical", "fullstack", "medium", "Describe how you would architect a file upload system that handles large files efficiently."),
    _q("fs-medium-3", "technical", "fullstack", "medium", "What security measures do you implement to protect against common web vulnerabilities?"),
    _q("fs-hard-1", "technical", "fullstack", "hard", "Design a system to handle 1 million concurrent users. What technologies and architecture would you use?"),
    _q("fs-hard-2", "technical", "fullstack", "hard", "Explain how you would implement end-to-end encryption for a messaging application."),
    _q("beh-1", "behavioral", "general", "medium", "Tell me about a time when you had to deal with a difficult team member. How did you handle it?"),
    _q("beh-2", "behavioral", "general", "medium", "Describe a challenging technical problem you solved. What was your approach?"),
    _q("beh-3", "behavioral", "general", "medium", "Tell me about a time when you had to learn a new technology quickly. How did you approach it?"),
    _q("beh-4", "behavioral", "general", "medium", "Describe a situation where you had to make a trade-off between perfect code and meeting a deadline."),
    _q("beh-5", "behavioral", "general", "medium", "Tell me about a project you're most proud of. What was your role and what made it successful?"),
    _q("beh-6", "behavioral", "general", "medium", "How do you handle code reviews? Can you describe a time when you received critical feedback?"),
    _q("sys-1", "system-design", "general", "hard", "Design a URL shortening service like bit.ly. Consider scalability and analytics."),
    _q("sys-2", "system-design", "general", "hard", "How would you design a notification system that delivers notifications via email, SMS, and push?"),
    _q("sys-3", "system-design", "general", "hard", "Design a social media feed system. How would you rank and personalize content for users?"),
    _q("sys-4", "system-design", "general", "hard", "Design a video streaming service like YouTube. Focus on video storage and delivery."),
    _q("hr-1", "hr", "general", "easy", "Can you briefly introduce yourself and tell me about your background?"),
    _q("hr-2", "hr", "general", "easy", "What interests you about this role? Why do you want to work here?"),
    _q("hr-3", "hr", "general", "easy", "What are your career goals for the next 3-5 years?"),
    _q("hr-4", "hr", "general", "easy", "What do you consider your greatest strength and weakness as a developer?"),
]


def normalize_role(role: str) -> str:
    lowered = role.lower()
    if "frontend" in lowered:
        return "frontend"
    if "backend" in lowered:
        return "backend"
    if "full" in lowered:
        return "fullstack"
    return "general"


def normalize_type(interview_type: str) -> str:
    lowered = interview_type.lower()
    if "technical" in lowered:
        return "technical"
    if "behavioral" in lowered:
        return "behavioral"
    if "system" in lowered:
        return "system-design"
    if "hr" in lowered:
        return "hr"
    return "technical"


def select_questions(config: Mapping[str, str], limit: int = MAX_QUESTIONS) -> List[Question]:
    role = normalize_role(config["role"])
    category = normalize_type(config["type"])
    difficulty = config["difficulty"].lower()

    filtered = [
        q for q in QUESTION_BANK
        if q["role"] in (role, "general") and q["category"] == category and q["difficulty"] == difficulty
    ]
    if len(filtered) < limit:
        filtered = [q for q in QUESTION_BANK if q["category"] == category]
    if len(filtered) < limit:
        filtered = [q for q in QUESTION_BANK if q["difficulty"] == difficulty]
    if len(filtered) < limit:
        filtered = list(QUESTION_BANK)

    return filtered[:limit]
