from __future__ import annotations

from models.field_extraction_rule import FieldExtractionRule


# Boundary patterns for carving answers out of the combined candidate
# materials document. Patterns are compiled with DOTALL | MULTILINE, so ".*?"
# also spans the stray line breaks and asterisks that the document export
# inserts in the middle of words. Wildcards are lazy on purpose so a start
# marker stops at the question itself instead of running on into the answer.
#
# Every field lists its (start, end) pairs in priority order: the materials
# template has been reworded several times and old submissions still use the
# older phrasings.

COMPANY_NAME = "Oxide"

# Verbatim scaffolding removed from every captured answer
BOILERPLATE: tuple[str, ...] = (
    "________________",
    f"{COMPANY_NAME} Candidate Materials: Technical Program Manager",
    f"{COMPANY_NAME} Candidate Materials",
    "Work sample(s)",
)

QUESTION_TECHNICALLY_CHALLENGING = r"W.*?at work.*?ave you found mos.*?challenging.*?caree.*?wh.*?\?"
QUESTION_WORK_PROUD_OF = r"W.*?at work.*?ave you done that you.*?particularl.*?proud o.*?and why\?"
QUESTION_HAPPIEST_CAREER = r"W.*?en have you been happiest in your professiona.*?caree.*?and why\?"
QUESTION_UNHAPPIEST_CAREER = r"W.*?en have you been unhappiest in your professiona.*?caree.*?and why\?"
QUESTION_VALUE_REFLECTED = (
    rf"F.*?r one of {COMPANY_NAME}.*?s values.*?describe an example of ho.*?it wa.*?reflected"
    r".*?particula.*?body.*?you.*?work\."
)
QUESTION_VALUE_VIOLATED = (
    rf"F.*?r one of {COMPANY_NAME}.*?s values.*?describe an example of ho.*?it wa.*?violated"
    r".*?you.*?organization o.*?work\."
)
QUESTION_VALUES_IN_TENSION = (
    rf"F.*?r a pair of {COMPANY_NAME}.*?s values.*?describe a time in whic.*?the tw.*?values"
    r".*?tensio.*?for.*?your.*?and how yo.*?resolved it\."
)
QUESTION_WHY_COMPANY = rf"W.*?y do you want to work for {COMPANY_NAME}\?"

# An empty end pattern captures through the end of the document.
END_OF_DOCUMENT = ""


FIELD_RULES: tuple[FieldExtractionRule, ...] = (
    FieldExtractionRule(
        name="work_samples",
        candidates=(
            (r"Work sample\(s\)", "Writing samples"),
            (
                r"If.*?his work is entirely proprietary.*?please describe it as fully as y.*?can, "
                r"providing necessary context\.",
                "Writing samples",
            ),
            # Technical program manager materials
            (r"What would you have done differently\?", "Exploratory samples"),
            (r"Some questions.*?o have in mind as you describe them:", "Exploratory samples"),
            (r"Work samples", "Exploratory samples"),
        ),
    ),
    FieldExtractionRule(
        name="writing_samples",
        candidates=(
            (r"Writing sample\(s\)", "Analysis samples"),
            (
                r"Please submit at least one writing sample \(and no more tha.*?three\) that you "
                r"feel represent.*?you.*?providin.*?links if.*?necessary\.",
                "Analysis samples",
            ),
            (r"Writing samples", "Analysis samples"),
        ),
    ),
    FieldExtractionRule(
        name="analysis_samples",
        candidates=(
            # $ is end of line here (MULTILINE), not end of document
            (r"Analysis sample\(s\)$", "Presentation samples"),
            (
                r"please recount a.*?incident.*?which you analyzed syste.*?misbehavior.*?"
                r"including as much technical detail as you can recall\.",
                "Presentation samples",
            ),
            (r"Analysis samples", "Presentation samples"),
        ),
    ),
    FieldExtractionRule(
        name="presentation_samples",
        candidates=(
            (r"Presentation sample\(s\)", "Questionnaire"),
            (
                r"I.*?you don’t have a publicl.*?available presentation.*?pleas.*?"
                r"describe a topic on which you have presented in th.*?past\.",
                "Questionnaire",
            ),
            (r"Presentation samples", "Questionnaire"),
        ),
    ),
    FieldExtractionRule(
        name="exploratory_samples",
        candidates=(
            (r"Exploratory sample\(s\)", "Questionnaire"),
            (
                r"What’s an example o.*?something that you needed to explore, reverse engineer, "
                r"decipher or otherwise figure out a.*?part of a program or project and how did "
                r"you do it\? Please provide as much detail as you ca.*?recall\.",
                "Questionnaire",
            ),
            (r"Exploratory samples", "Questionnaire"),
        ),
    ),
    FieldExtractionRule(
        name="question_technically_challenging",
        candidates=((QUESTION_TECHNICALLY_CHALLENGING, QUESTION_WORK_PROUD_OF),),
    ),
    FieldExtractionRule(
        name="question_proud_of",
        candidates=((QUESTION_WORK_PROUD_OF, QUESTION_HAPPIEST_CAREER),),
    ),
    FieldExtractionRule(
        name="question_happiest",
        candidates=((QUESTION_HAPPIEST_CAREER, QUESTION_UNHAPPIEST_CAREER),),
    ),
    FieldExtractionRule(
        name="question_unhappiest",
        candidates=((QUESTION_UNHAPPIEST_CAREER, QUESTION_VALUE_REFLECTED),),
    ),
    FieldExtractionRule(
        name="question_value_reflected",
        candidates=((QUESTION_VALUE_REFLECTED, QUESTION_VALUE_VIOLATED),),
    ),
    FieldExtractionRule(
        name="question_value_violated",
        candidates=((QUESTION_VALUE_VIOLATED, QUESTION_VALUES_IN_TENSION),),
    ),
    FieldExtractionRule(
        name="question_values_in_tension",
        candidates=((QUESTION_VALUES_IN_TENSION, QUESTION_WHY_COMPANY),),
    ),
    FieldExtractionRule(
        name="question_why_company",
        candidates=((QUESTION_WHY_COMPANY, END_OF_DOCUMENT),),
    ),
)
