"""
Prompt templates and Gemini response schemas
"""
from google.genai import types

from medstudy.schemas import Difficulty


STUDY_GUIDE_SYSTEM_PROMPT = (
    "You are a world-class medical educator specializing in Gross Anatomy and Clinical Pathology. "
    "Your goal is to make complex topics 'stick' using high-yield facts, visual flowcharts (Mermaid.js), "
    "and active recall games."
)


def build_study_guide_prompt(topic: str) -> str:
    return f"""Create a high-yield Clinical Anatomy and Medical review guide for: "{topic}".

The goal is to help doctors maximize retention of complex anatomical and physiological concepts by bridging "Basic Science" with "Clinical Relevance".
Avoid dense walls of text. Use bullet points or short paragraphs where possible.

For each sub-section (e.g., if topic is Heart: Coronary Blood Supply, Valves, Conduction System), provide:
1. Foundational: Detailed anatomy, embryology, or physiology (First Year level). **CRITICAL:** Include Surface Anatomy & Landmarks.
2. Clinical: The "Third Year" application. What goes wrong? (e.g., specific infarct territories, nerve palsies).
3. Mermaid Chart: A visual flowchart (graph TD) to represent the flow, pathway, or hierarchy. **IMPORTANT:** Enclose all text inside node brackets [] with double quotes. Example: A["Left (L)"] --> B["Right (R)"].
4. Key Points: 2-3 rapid-fire facts.
5. Mnemonics: A specific memory aid.
6. Matching Pairs: 3-4 pairs for active recall.

Also provide a brief, high-level overview of the topic and 2 "Next Step" related topics for a predictive study pathway."""


def build_quiz_prompt(topic: str, difficulty: Difficulty) -> str:
    focus = (
        "Third-order reasoning and obscure presentations"
        if difficulty == Difficulty.HARD
        else "Foundational concepts"
    )
    return (
        f"Generate 5 USMLE Step 1/Step 2 CK style clinical vignette questions regarding: {topic}.\n"
        f"Difficulty Level: {difficulty.value}.\n\n"
        "Focus on:\n"
        "1. Clinical anatomy correlations.\n"
        "2. Differentiating similar pathologies.\n"
        f"3. {focus}.\n"
    )


def build_image_prompt(topic: str, section: str) -> str:
    return (
        f"Detailed medical anatomical diagram of {section} in the context of {topic}. "
        "Clean, professional textbook style illustration. White background. "
        "Clearly labeled structures. High resolution, educational."
    )


def build_tutor_instruction(topic: str) -> str:
    return (
        f'You are an expert medical tutor helping a student study "{topic}".\n'
        "Your goal is to explain complex concepts simply, provide analogies, and answer questions accurately.\n"
        "Use the Google Search tool to find up-to-date information, clinical guidelines, or recent papers "
        "if the user asks about them or if standard knowledge might be outdated.\n"
        "Always cite your sources if you use the search tool.\n"
        "If the user asks for images, describe them vividly or explain that you can generate diagrams in the "
        "main study view, but for now, you can provide detailed text explanations and search links."
    )


def _string(description: str = None) -> types.Schema:
    return types.Schema(type=types.Type.STRING, description=description)


def _string_list(description: str = None) -> types.Schema:
    return types.Schema(type=types.Type.ARRAY, items=_string(), description=description)


MATCHING_PAIR_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "term": _string(),
        "definition": _string(),
    },
    required=["term", "definition"],
)

SECTION_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "title": _string(),
        "foundational": _string(),
        "clinical": _string(),
        "mermaidChart": _string(
            "Mermaid.js graph syntax (e.g. 'graph TD; A[\"Start\"]-->B[\"End\"]'). "
            "Use double quotes for node text."
        ),
        "keyPoints": _string_list(),
        "mnemonics": _string_list("List of memory aids or acronyms"),
        "matchingPairs": types.Schema(type=types.Type.ARRAY, items=MATCHING_PAIR_SCHEMA),
    },
    required=["title", "foundational", "clinical", "mermaidChart", "keyPoints", "mnemonics", "matchingPairs"],
)

STUDY_GUIDE_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "topic": _string(),
        "overview": _string(),
        "relatedTopics": _string_list(
            "Predictive Pathway: Suggest 2 related topics the student should study next."
        ),
        "sections": types.Schema(type=types.Type.ARRAY, items=SECTION_SCHEMA),
    },
    required=["topic", "overview", "sections", "relatedTopics"],
)

QUESTION_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "question": _string(),
        "options": _string_list("List of 4 or 5 potential answers"),
        "correctAnswer": types.Schema(
            type=types.Type.INTEGER,
            description="Zero-based index of the correct option",
        ),
        "explanation": _string(),
    },
    required=["question", "options", "correctAnswer", "explanation"],
)

QUIZ_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "questions": types.Schema(type=types.Type.ARRAY, items=QUESTION_SCHEMA),
    },
    required=["questions"],
)
