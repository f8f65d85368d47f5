"""
Default keyword, alias, and role tables.

These are the built-in values for every table in the Taxonomy. They are plain
Python literals here; registry.py freezes them into an immutable Taxonomy and is
the only module the engines read from.

Ordering matters in several tables:
- ATS_ROLE_KEYWORDS and ROLE_REQUIREMENTS are matched first-key-wins by substring
- ROLE_REQUIREMENTS values are reported in declaration order
- SKILL_ALIASES is scanned in declaration order when resolving a canonical name
"""

# =============================================================================
# SCREENING KEYWORDS
# =============================================================================

TECH_KEYWORDS = (
    # Programming languages
    "javascript", "typescript", "python", "java", "c++", "c#", "go", "rust", "php", "ruby",
    "swift", "kotlin", "scala", "r", "matlab", "sql", "html", "css",
    # Frameworks and libraries
    "react", "angular", "vue", "node.js", "express", "django", "flask", "spring", "laravel",
    "rails", "asp.net", "jquery", "bootstrap", "tailwind", "material-ui", "redux", "mobx",
    # Databases
    "mysql", "postgresql", "mongodb", "redis", "elasticsearch", "cassandra", "dynamodb",
    "sqlite", "oracle", "sql server",
    # Cloud and DevOps
    "aws", "azure", "gcp", "docker", "kubernetes", "jenkins", "gitlab", "github actions",
    "terraform", "ansible", "chef", "puppet", "nginx", "apache",
    # Tools and practices
    "git", "jira", "confluence", "slack", "figma", "sketch", "photoshop", "illustrator",
    "postman", "swagger", "graphql", "rest api", "microservices", "agile", "scrum",
    # Soft skills
    "leadership", "teamwork", "communication", "problem solving", "analytical", "creative",
    "adaptable", "detail-oriented", "self-motivated", "collaborative",
)

HIGH_IMPORTANCE_KEYWORDS = ("javascript", "python", "react", "node.js", "sql", "git", "api")

KEYWORD_VARIATIONS = {
    "javascript": ("js", "ecmascript", "es6", "es2015"),
    "typescript": ("ts",),
    "react": ("reactjs", "react.js"),
    "node.js": ("nodejs", "node"),
    "css": ("css3", "cascading style sheets"),
    "html": ("html5", "hypertext markup language"),
}

# Keys are matched as substrings of the lowercased target role
ATS_ROLE_KEYWORDS = {
    "frontend": (
        "react", "vue", "angular", "javascript", "typescript", "css", "html", "responsive design",
    ),
    "backend": ("node.js", "python", "java", "api", "database", "server", "microservices"),
    "fullstack": (
        "react", "node.js", "javascript", "typescript", "api", "database", "frontend", "backend",
    ),
    "devops": ("docker", "kubernetes", "aws", "ci/cd", "jenkins", "terraform", "monitoring"),
    "data": (
        "python", "sql", "machine learning", "data analysis", "pandas", "numpy", "visualization",
    ),
    "mobile": (
        "react native", "flutter", "ios", "android", "swift", "kotlin", "mobile development",
    ),
}

ACTION_VERBS = (
    "achieved", "built", "created", "developed", "implemented",
    "improved", "led", "managed", "optimized", "reduced",
)

# =============================================================================
# SKILL ALIASES AND ROLE REQUIREMENTS
# =============================================================================

SKILL_ALIASES = {
    # Programming languages
    "JavaScript": ("javascript", "js", "ecmascript", "es6", "node.js", "nodejs"),
    "TypeScript": ("typescript", "ts"),
    "Python": ("python", "django", "flask", "fastapi", "pandas", "numpy"),
    "Java": ("java", "spring", "spring boot", "hibernate"),
    "C++": ("c++", "cpp", "stl"),
    "C#": ("c#", "csharp", ".net", "asp.net"),
    "Go": ("go", "golang"),
    "Rust": ("rust",),
    "PHP": ("php", "laravel", "symfony"),
    "Ruby": ("ruby", "rails", "ruby on rails"),
    "Swift": ("swift", "ios"),
    "Kotlin": ("kotlin", "android"),
    # Frontend
    "React": ("react", "reactjs", "react.js", "jsx", "hooks"),
    "Vue.js": ("vue", "vuejs", "vue.js", "nuxt"),
    "Angular": ("angular", "angularjs", "typescript"),
    "HTML/CSS": ("html", "css", "html5", "css3", "sass", "scss", "less"),
    "Responsive Design": ("responsive", "mobile-first", "bootstrap", "tailwind"),
    # Backend
    "Node.js": ("node", "nodejs", "express", "nestjs"),
    "REST APIs": ("rest", "api", "restful", "http"),
    "GraphQL": ("graphql", "apollo"),
    "Microservices": ("microservices", "distributed systems"),
    # Databases
    "SQL": ("sql", "mysql", "postgresql", "sqlite", "oracle"),
    "NoSQL": ("mongodb", "nosql", "cassandra", "dynamodb"),
    "Redis": ("redis", "caching"),
    # Cloud and DevOps
    "AWS": ("aws", "amazon web services", "ec2", "s3", "lambda"),
    "Docker": ("docker", "containerization"),
    "Kubernetes": ("kubernetes", "k8s", "orchestration"),
    "CI/CD": ("jenkins", "github actions", "gitlab ci", "continuous integration"),
    # Tools and methodologies
    "Git": ("git", "github", "gitlab", "version control"),
    "Agile": ("agile", "scrum", "kanban", "sprint"),
    "Testing": ("unit testing", "integration testing", "jest", "cypress", "selenium"),
    # Data and analytics
    "Data Analysis": ("data analysis", "analytics", "statistics"),
    "Machine Learning": ("machine learning", "ml", "ai", "tensorflow", "pytorch"),
    "Data Visualization": ("visualization", "charts", "d3.js", "tableau"),
}

ROLE_REQUIREMENTS = {
    "frontend developer": (
        "JavaScript", "React", "HTML/CSS", "Responsive Design", "Git", "REST APIs",
    ),
    "backend developer": ("Node.js", "Python", "Java", "SQL", "REST APIs", "Git", "AWS"),
    "full stack developer": (
        "JavaScript", "React", "Node.js", "SQL", "REST APIs", "Git", "HTML/CSS",
    ),
    "data scientist": ("Python", "Machine Learning", "Data Analysis", "SQL", "Data Visualization"),
    "devops engineer": ("AWS", "Docker", "Kubernetes", "CI/CD", "Git", "Linux"),
    "mobile developer": ("React Native", "Swift", "Kotlin", "JavaScript", "Git", "REST APIs"),
}

EMERGING_TECHNOLOGIES = (
    "Next.js", "Svelte", "Deno", "WebAssembly", "GraphQL",
    "Serverless", "Edge Computing", "Web3", "AI/ML",
)

COMPLEMENTARY_SKILLS = {
    "React": ("Redux", "Next.js", "TypeScript", "Jest"),
    "Node.js": ("Express", "MongoDB", "Redis", "Docker"),
    "Python": ("Django", "Flask", "Pandas", "NumPy"),
    "JavaScript": ("TypeScript", "React", "Node.js", "Jest"),
    "AWS": ("Docker", "Kubernetes", "Terraform", "Jenkins"),
}
