"""
Deterministic placeholder content served when no Gemini API key is configured
"""
from typing import List, Union

from medstudy.schemas import (
    Difficulty,
    MatchingPair,
    Question,
    QuizSession,
    Section,
    StudyGuide,
    coerce_difficulty,
)


def _bullets(lines: List[str]) -> str:
    return "\n".join(f"• {line}" for line in lines)


def generate_mock_study_guide(topic: str) -> StudyGuide:
    """Fixed-shape study guide with three sections built around `topic`."""
    return StudyGuide(
        topic=topic,
        overview=(
            f"{topic} is a fundamental concept in medical education. This comprehensive guide covers "
            "the essential anatomy, physiology, and clinical applications. Whether you're preparing for "
            "board exams or deepening your clinical knowledge, this module bridges foundational science "
            "with real-world clinical practice."
        ),
        sections=[
            Section(
                title="Anatomy & Structure",
                foundational=_bullets([
                    f"Basic embryological origin and development of {topic}",
                    "Gross anatomical landmarks and relationships",
                    "Surface anatomy and clinical landmarks",
                    "Normal anatomical variations",
                    "Structural components and their functions",
                    "Blood supply and innervation patterns",
                    "Relationships to adjacent structures",
                ]),
                clinical=_bullets([
                    f"Common pathologies affecting {topic}",
                    "Clinical presentations and symptoms",
                    "Diagnostic approaches and imaging findings",
                    "Treatment considerations",
                    "Prognosis and complications",
                    "Clinical correlations with anatomy",
                    "Risk factors and prevention strategies",
                ]),
                mermaid_chart=(
                    'graph TD\n'
                    '    A["Structure Overview"] --> B["Anatomy"]\n'
                    '    A --> C["Physiology"]\n'
                    '    B --> D["Clinical Relevance"]\n'
                    '    C --> D\n'
                    '    D --> E["Treatment Approach"]'
                ),
                key_points=[
                    "Key Point 1: This is an essential anatomical landmark with significant clinical importance",
                    "Key Point 2: Understanding the normal anatomy is crucial for identifying pathology",
                    "Key Point 3: Clinical examination must correlate with anatomical knowledge",
                ],
                mnemonics=[
                    "Use the memory aid: Anatomy Always Applies in Clinical examination",
                ],
                matching_pairs=[
                    MatchingPair(term="Structure A", definition="Primary component with specific function"),
                    MatchingPair(term="Structure B", definition="Adjacent anatomy providing support"),
                    MatchingPair(term="Clinical Finding", definition="Pathological sign associated with disease"),
                ],
            ),
            Section(
                title="Physiology & Function",
                foundational=_bullets([
                    f"Normal physiological mechanisms of {topic}",
                    "Homeostatic regulation",
                    "Neural and hormonal control",
                    "Functional relationships",
                    "Normal ranges and parameters",
                    "Regulatory feedback systems",
                    "Integration with other systems",
                ]),
                clinical=_bullets([
                    f"Dysfunction and pathophysiology of {topic}",
                    "Compensatory mechanisms",
                    "Failure modes",
                    "Clinical symptoms and signs",
                    "Diagnostic testing",
                    "Therapeutic interventions",
                    "Outcome monitoring",
                ]),
                mermaid_chart=(
                    'graph TD\n'
                    '    A["Normal Function"] --> B["Regulation"]\n'
                    '    B --> C["Homeostasis"]\n'
                    '    C --> D["System Integration"]\n'
                    '    D --> E["Clinical Outcomes"]'
                ),
                key_points=[
                    "Key Point 1: Physiological understanding explains clinical presentations",
                    "Key Point 2: Regulatory mechanisms maintain normal function",
                    "Key Point 3: Pathophysiology underlies all disease states",
                ],
                mnemonics=[
                    "Function Follows Form - understand anatomy to predict physiology",
                ],
                matching_pairs=[
                    MatchingPair(term="Normal Value", definition="Expected physiological parameter"),
                    MatchingPair(term="Abnormal State", definition="Deviation from homeostasis"),
                    MatchingPair(term="Compensation", definition="Body's response to maintain function"),
                ],
            ),
            Section(
                title="Clinical Application",
                foundational=_bullets([
                    f"Common disease entities involving {topic}",
                    "Epidemiology and risk factors",
                    "Predisposing conditions",
                    "Pathogenesis overview",
                    "Natural history",
                    "Classification systems",
                    "Staging and grading",
                ]),
                clinical=_bullets([
                    f"Clinical presentation patterns in {topic} disease",
                    "Diagnostic workup strategy",
                    "Differential diagnosis",
                    "Evidence-based management",
                    "Pharmacological interventions",
                    "Surgical options",
                    "Follow-up and monitoring protocols",
                ]),
                mermaid_chart=(
                    'graph TD\n'
                    '    A["Patient Presentation"] --> B["History & Exam"]\n'
                    '    B --> C["Investigations"]\n'
                    '    C --> D["Diagnosis"]\n'
                    '    D --> E["Treatment Plan"]'
                ),
                key_points=[
                    "Key Point 1: Early recognition improves outcomes",
                    "Key Point 2: Management depends on disease severity",
                    "Key Point 3: Long-term follow-up prevents complications",
                ],
                mnemonics=[
                    "Clinical Pearl: Always consider the patient's presentation in context",
                ],
                matching_pairs=[
                    MatchingPair(term="Symptom", definition="Subjective complaint from patient"),
                    MatchingPair(term="Sign", definition="Objective finding on examination"),
                    MatchingPair(term="Syndrome", definition="Collection of related findings"),
                ],
            ),
        ],
        related_topics=["Advanced Clinical Topics", "System-Based Integration"],
    )


def _easy_questions(topic: str) -> List[Question]:
    return [
        Question(
            question=f"What is the primary function of structures related to {topic}?",
            options=["Option A - Correct function", "Option B - Incorrect", "Option C - Incorrect", "Option D - Incorrect"],
            correct_answer=0,
            explanation=(
                "This is the correct answer because it accurately describes the primary physiological function. "
                "Understanding this basic function is essential for clinical practice."
            ),
        ),
        Question(
            question=f"Which of the following is a normal anatomical finding in {topic}?",
            options=["Finding A - Normal", "Finding B - Abnormal", "Finding C - Abnormal", "Finding D - Abnormal"],
            correct_answer=0,
            explanation=(
                "This finding is within normal range. Being able to distinguish normal anatomy from pathology "
                "is crucial for interpreting clinical findings."
            ),
        ),
    ]


def _medium_questions(topic: str) -> List[Question]:
    return [
        Question(
            question=(
                f"A 45-year-old patient presents with symptoms related to {topic}. "
                "What is the most likely diagnosis based on the clinical presentation?"
            ),
            options=["Condition A - Most likely", "Condition B - Less likely", "Condition C - Rare", "Condition D - Very rare"],
            correct_answer=0,
            explanation=(
                "Given the clinical presentation and epidemiology, this is the most common diagnosis. "
                "Understanding disease prevalence is important for clinical reasoning."
            ),
        ),
        Question(
            question=f"Which imaging modality is most sensitive for detecting pathology in {topic}?",
            options=[
                "Modality A - Most sensitive",
                "Modality B - Less sensitive",
                "Modality C - Not useful",
                "Modality D - Contraindicated",
            ],
            correct_answer=0,
            explanation=(
                "This modality provides the best visualization and highest sensitivity for detecting abnormalities. "
                "Choosing appropriate diagnostic tests improves patient care."
            ),
        ),
    ]


def _hard_questions(topic: str) -> List[Question]:
    return [
        Question(
            question=(
                f"A 52-year-old with complex medical history presents with atypical presentation of {topic} "
                "pathology. Which finding would most distinguish this from other similar conditions?"
            ),
            options=[
                "Finding A - Distinguishing",
                "Finding B - Common to multiple",
                "Finding C - Non-specific",
                "Finding D - Artifact",
            ],
            correct_answer=0,
            explanation=(
                "This finding is pathognomonic and distinguishes this condition from other similar entities. "
                "Higher-level reasoning requires recognizing subtle differentiating features."
            ),
        ),
        Question(
            question=f"What is the most important mechanism for preventing complications in {topic} disease management?",
            options=[
                "Strategy A - Most important",
                "Strategy B - Secondary",
                "Strategy C - Tertiary",
                "Strategy D - Not proven",
            ],
            correct_answer=0,
            explanation=(
                "This prevention strategy addresses the underlying pathophysiology and prevents the most significant "
                "complications. Evidence-based medicine emphasizes early intervention."
            ),
        ),
    ]


def _generic_questions(topic: str) -> List[Question]:
    return [
        Question(
            question=f"How would you manage a patient with {topic} according to current clinical guidelines?",
            options=[
                "Approach A - Standard care",
                "Approach B - Alternative",
                "Approach C - Outdated",
                "Approach D - Contraindicated",
            ],
            correct_answer=0,
            explanation=(
                "This represents current evidence-based practice. Staying updated with clinical guidelines "
                "ensures optimal patient outcomes."
            ),
        ),
        Question(
            question=f"What is the expected prognosis with appropriate management of {topic} pathology?",
            options=[
                "Prognosis A - Good outcome",
                "Prognosis B - Fair outcome",
                "Prognosis C - Poor outcome",
                "Prognosis D - Unpredictable",
            ],
            correct_answer=0,
            explanation=(
                "With appropriate management, most patients have favorable outcomes. Patient counseling about "
                "realistic expectations improves satisfaction."
            ),
        ),
        Question(
            question=f"Which complication of {topic} is most common and clinically significant?",
            options=[
                "Complication A - Most significant",
                "Complication B - Less common",
                "Complication C - Rare",
                "Complication D - Very rare",
            ],
            correct_answer=0,
            explanation=(
                "Recognizing common complications allows for proactive prevention and early detection, "
                "improving overall patient outcomes."
            ),
        ),
    ]


_QUESTIONS_BY_DIFFICULTY = {
    Difficulty.EASY: _easy_questions,
    Difficulty.MEDIUM: _medium_questions,
    Difficulty.HARD: _hard_questions,
}


def generate_mock_quiz(topic: str, difficulty: Union[Difficulty, str] = Difficulty.MEDIUM) -> QuizSession:
    """Two difficulty-specific questions followed by three generic ones."""
    base = _QUESTIONS_BY_DIFFICULTY[coerce_difficulty(difficulty)](topic)
    return QuizSession(questions=base + _generic_questions(topic))
