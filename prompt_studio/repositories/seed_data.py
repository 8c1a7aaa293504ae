"""Reference content loaded into a fresh prompt library."""

CATEGORY_NAMES = [
    # Domain Topics
    "Domain Topic: Business",
    "Domain Topic: Education",
    "Domain Topic: Technology",
    "Domain Topic: Customer Support",

    # Utilities
    "Utility: Connecting Prompts",
    "Utility: Make Concise",
    "Utility: Error Handling",
    "Utility: Format Output",
]

TEMPLATES = [
    {
        "name": "RLHF Template",
        "content": "This is a template for Reinforcement Learning from Human Feedback prompts.",
    },
    {
        "name": "Persona Creator",
        "content": "Use this template to create a persona for your AI assistant.",
    },
]

PROMPTS = [
    # Customer Support
    {
        "title": "Initial Greeting",
        "content": "Hello, thank you for contacting our support team. How can I assist you today?",
        "category": "Domain Topic: Customer Support",
        "tags": ["Greeting"],
    },
    {
        "title": "Product Question",
        "content": (
            "I understand you have a question about our product. Could you please provide "
            "more details about what you're looking for?"
        ),
        "category": "Domain Topic: Customer Support",
        "tags": ["Question"],
    },
    {
        "title": "Issue Resolution",
        "content": (
            "I'll help resolve your issue as quickly as possible. Let me gather some "
            "information to better assist you."
        ),
        "category": "Domain Topic: Customer Support",
        "tags": ["Support"],
    },

    # Connecting Prompts
    {
        "title": "Context Transition",
        "content": "Based on the information above, let's now focus on [TOPIC].",
        "category": "Utility: Connecting Prompts",
        "tags": ["Transition"],
    },
    {
        "title": "Logical Bridge",
        "content": (
            "To connect these ideas, consider the following relationship between "
            "[CONCEPT A] and [CONCEPT B]."
        ),
        "category": "Utility: Connecting Prompts",
        "tags": ["Connection"],
    },

    # Make Concise
    {
        "title": "Brevity Instruction",
        "content": "Express the above in the most concise way possible, focusing only on essential information.",
        "category": "Utility: Make Concise",
        "tags": ["Brevity"],
    },
    {
        "title": "Bullet Point Format",
        "content": "Summarize the key points from above in a bullet point list with no more than 5 items.",
        "category": "Utility: Make Concise",
        "tags": ["Format"],
    },

    # Error Handling
    {
        "title": "Clarification Request",
        "content": (
            "If you encounter ambiguity or missing information, please indicate what "
            "specific details you need to proceed."
        ),
        "category": "Utility: Error Handling",
        "tags": ["Clarification"],
    },
    {
        "title": "Fallback Response",
        "content": (
            "If unable to complete the request as described, provide an explanation of "
            "limitations and suggest alternative approaches."
        ),
        "category": "Utility: Error Handling",
        "tags": ["Fallback"],
    },

    # Format Output
    {
        "title": "JSON Structure",
        "content": "Format your response as a valid JSON object with the following structure: [STRUCTURE]",
        "category": "Utility: Format Output",
        "tags": ["JSON"],
    },
    {
        "title": "Markdown Formatting",
        "content": (
            "Present your response using Markdown formatting. Use headers for sections, "
            "code blocks for examples, and bullet points for lists."
        ),
        "category": "Utility: Format Output",
        "tags": ["Markdown"],
    },
]
