"""Wording pools for generated questions and feedback.

Entries are str.format templates. Which entry is picked only changes the
phrasing of a question, never its answer.
"""

MCQ_STEMS = (
    "Which statement best describes {concept}?",
    "What is the primary characteristic of {concept}?",
    "In the context of {topic}, {concept} refers to:",
    "Which of the following is true about {concept}?",
)

MCQ_SYNTHETIC_DISTRACTORS = (
    "A process unrelated to {concept}",
    "The opposite of what {concept} represents",
    "A common misconception about {concept}",
)

TRUE_STATEMENTS = (
    "{concept} is an important concept in {topic}",
    "The definition of {concept} includes: {excerpt}",
    "Understanding {concept} is essential for mastering {topic}",
)

FALSE_STATEMENTS = (
    "{concept} is completely unrelated to {topic}",
    "{concept} has no practical applications",
    "The concept of {concept} is outdated and no longer relevant",
)

FILL_BLANK_TEMPLATES = (
    "_____ is defined as {excerpt}...",
    "In {topic}, the term _____ refers to {excerpt}...",
    "The concept of _____ is important because {excerpt}...",
)

SHORT_ANSWER_PROMPTS = (
    "Define {concept} in your own words.",
    "Explain the significance of {concept} in {topic}.",
    "What are the key characteristics of {concept}?",
    "How does {concept} relate to other concepts in {topic}?",
)

SHORT_ANSWER_GUIDANCE = "Your answer should include the main definition and key points."

EXPLAIN_PROMPTS = (
    "Explain in detail how {concept} works and why it is important in {topic}.",
    "Describe the relationship between {concept} and other key concepts in {topic}.",
    "Provide a comprehensive explanation of {concept}, including examples and applications.",
)

EXPLAIN_GUIDANCE = (
    "Your answer should be detailed and include examples, applications, "
    "and connections to other concepts."
)

# Remediation hints, by mastery severity
HINTS_SEVERE = (
    "Start with the basic definition and work up from there.",
    "Remember: {excerpt}...",
)
HINTS_MODERATE = (
    "Think about how this concept connects to what you already know.",
    "Break it down into smaller, manageable parts.",
)
HINTS_GENERAL = (
    "Review the core characteristics and key examples.",
    "Consider how this concept applies in real-world situations.",
)

RECOMMENDATION_REMEDIATION_REASON = "Performance in {concept} needs improvement"
RECOMMENDATION_REMEDIATION_ACTION = "Review fundamental concepts and practice similar questions"
RECOMMENDATION_ADVANCEMENT_REASON = "Strong performance in {concept}"
RECOMMENDATION_ADVANCEMENT_ACTION = "Try more challenging questions in this area"

OVERALL_FEEDBACK = {
    "excellent": (
        "Outstanding work! You've mastered this concept completely.",
        "Excellent understanding! You're clearly grasping the key ideas.",
        "Perfect! Your knowledge of this topic is impressive.",
    ),
    "good": (
        "Great job! You have a solid understanding with minor areas to polish.",
        "Well done! You're on the right track with this concept.",
        "Good work! A few more practice sessions and you'll have this mastered.",
    ),
    "needs_improvement": (
        "Keep working on this! Focus on the core concepts and try again.",
        "This concept needs more attention. Review the key points and practice.",
        "You're making progress! Spend some time reviewing the fundamentals.",
    ),
    "poor": (
        "Let's focus on building a strong foundation. Start with the basics.",
        "This topic needs more study time. Break it down into smaller parts.",
        "Take your time with this concept. Understanding takes practice.",
    ),
}

NEXT_STEP_ADVANCE = {
    "action": "Advance to next topic",
    "reason": "Strong performance indicates readiness for more advanced material",
}
NEXT_STEP_PRACTICE = {
    "action": "Practice similar problems",
    "reason": "More practice will solidify understanding",
}
NEXT_STEP_REVIEW = {
    "action": "Review fundamentals",
    "reason": "Build stronger foundation before progressing",
}
