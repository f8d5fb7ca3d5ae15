from typing import Dict, List

DOMAIN_KEYWORDS: Dict[str, List[str]] = {
    "frontend": [
        "react", "vue", "angular", "svelte", "nextjs", "typescript", "javascript",
        "redux", "context", "zustand", "recoil", "state", "props",
        "hooks", "useeffect", "usestate", "usememo", "usecallback", "useref",
        "lifecycle", "component", "jsx", "virtual dom", "reconciliation",
        "optimization", "memo", "lazy loading", "code splitting", "bundle",
        "performance", "lighthouse", "core web vitals", "ssr", "csr",
        "css", "tailwind", "styled-components", "sass", "flexbox", "grid",
        "webpack", "vite", "babel", "eslint", "prettier",
        "jest", "testing library", "cypress", "playwright", "unit test",
        "accessibility", "aria", "semantic html", "wcag",
    ],
    "backend": [
        "nodejs", "express", "fastify", "nestjs", "python", "django", "flask",
        "java", "spring", "golang", "rust",
        "postgresql", "mysql", "mongodb", "redis", "database", "sql", "nosql",
        "orm", "prisma", "sequelize", "mongoose", "query", "migration",
        "rest", "graphql", "api", "endpoint", "route", "middleware",
        "authentication", "authorization", "jwt", "oauth", "cors",
        "microservices", "monolith", "architecture", "design pattern",
        "mvc", "repository", "service layer", "dependency injection",
        "caching", "indexing", "optimization", "scaling", "load balancing",
        "throughput", "latency", "concurrency", "async", "queue",
        "security", "encryption", "hashing", "validation", "sanitization",
        "sql injection", "xss", "csrf",
        "docker", "kubernetes", "ci/cd", "deployment", "monitoring",
        "logging", "error handling",
    ],
    "fullstack": [
        "react", "nextjs", "typescript", "hooks", "component", "state",
        "nodejs", "express", "api", "database", "mongodb", "postgresql",
        "fullstack", "end-to-end", "client-server", "spa", "ssr",
        "authentication", "authorization", "session", "cookie",
        "deployment", "docker", "ci/cd", "git", "version control",
        "architecture", "design", "scalability", "performance",
        "rest", "graphql", "websocket",
    ],
    "data-science": [
        "python", "pandas", "numpy", "scikit-learn", "tensorflow", "pytorch",
        "jupyter", "matplotlib", "seaborn", "plotly",
        "machine learning", "deep learning", "neural network", "model",
        "algorithm", "regression", "classification", "clustering",
        "supervised", "unsupervised", "reinforcement",
        "statistics", "probability", "hypothesis", "correlation",
        "distribution", "variance", "standard deviation",
        "data cleaning", "feature engineering", "preprocessing",
        "normalization", "encoding", "pipeline",
        "accuracy", "precision", "recall", "f1 score", "cross validation",
        "overfitting", "underfitting", "bias", "variance",
    ],
    "devops": [
        "docker", "kubernetes", "container", "pod", "deployment",
        "helm", "service mesh", "istio",
        "ci/cd", "jenkins", "github actions", "gitlab", "pipeline",
        "continuous integration", "continuous deployment",
        "aws", "azure", "gcp", "cloud", "ec2", "s3", "lambda",
        "kubernetes", "terraform", "cloudformation",
        "monitoring", "prometheus", "grafana", "elk", "logging",
        "metrics", "alerting", "observability",
        "automation", "scripting", "ansible", "puppet", "chef",
        "infrastructure as code", "iac",
        "security", "secrets management", "vault", "ssl", "tls",
    ],
    "general": [
        "software", "engineering", "development", "programming",
        "algorithm", "data structure", "complexity", "optimization",
        "design pattern", "solid", "dry", "kiss", "clean code",
        "refactoring", "testing", "debugging", "documentation",
        "git", "version control", "code review", "agile", "scrum",
        "collaboration", "communication", "team", "project",
        "problem solving", "analysis", "solution", "approach",
        "implementation", "troubleshooting", "debugging",
    ],
}


def get_relevant_keywords(role: str, interview_type: str) -> List[str]:
    role_keywords = DOMAIN_KEYWORDS.get(role.lower(), [])
    general_keywords = DOMAIN_KEYWORDS["general"]

    # technical interviews lean on the role vocabulary
    if interview_type == "technical":
        return [*role_keywords, *general_keywords[:10]]
    if interview_type == "behavioral":
        return list(general_keywords)
    return [*role_keywords, *general_keywords]
