"""Short definitions for common interview authoring terms.

Keys are lowercase. Every explanation returned to a caller is paired with
citations from the corpus, so these texts are only a summary.
"""

TERM_DEFINITIONS: dict[str, str] = {
    "question": (
        "A question block shows a screen to the user and may collect input through "
        "fields, buttons or choices, with optional subquestion text."
    ),
    "fields": (
        "The fields specifier lists the inputs on a question screen; each entry pairs a "
        "label with a variable and may set a datatype, default, validation or visibility rule."
    ),
    "mandatory": (
        "A block marked mandatory must be satisfied for the interview to finish; the value "
        "may be True or a Python expression."
    ),
    "code": (
        "A code block holds Python that runs when the interview needs one of the variables "
        "it defines."
    ),
    "attachment": (
        "An attachment describes a document to assemble, from inline content or from a DOCX "
        "or PDF template."
    ),
    "attachments": "The plural attachments specifier lists several documents to assemble.",
    "objects": (
        "An objects block declares object instances such as Individual, DAList or DADict "
        "for use in the interview."
    ),
    "include": "The include specifier pulls the blocks of another YAML file into the interview.",
    "metadata": (
        "The metadata block sets interview-level information such as the title, short "
        "title, description and authors."
    ),
    "review": (
        "A review block shows previously answered items with buttons that let the user go "
        "back and edit them."
    ),
    "event": "An event block defines a screen reached by name, typically through an action.",
    "sets": "The sets specifier declares which variables a block defines.",
    "template": "A template block defines named text that can be reused in questions and documents.",
    "table": "A table block renders a list or dictionary as rows and columns, optionally editable.",
    "initial": "An initial block runs on every screen load before the interview logic is evaluated.",
    "sections": "The sections block defines the navigation outline shown alongside the interview.",
    "features": "The features block turns interview-wide options on or off, such as the progress bar.",
    "datatype": "The datatype of a field controls the kind of input collected (text, number, date, yesno, ...).",
    "show if": "The show if modifier displays a field only when a variable or expression is true.",
    "hide if": "The hide if modifier hides a field when a variable or expression is true.",
    "yesno": "The yesno specifier asks a yes/no question and stores the answer as a boolean.",
    "noyes": "The noyes specifier stores the inverse of the user's yes/no answer.",
    "signature": "The signature specifier presents a drawing pad for the user's signature.",
    "subquestion": "The subquestion specifier adds explanatory text below the question heading.",
    "buttons": "The buttons specifier offers a set of buttons, each setting the variable to a value.",
    "choices": "The choices specifier lists the options of a multiple choice field.",
    "continue button field": (
        "The continue button field specifier sets a variable to True when the user presses Continue."
    ),
    "list collect": (
        "The list collect specifier gathers a list by asking the same question for each item, "
        "with an option to add another."
    ),
    "generic object": (
        "A generic object block applies a question to any object of the given class, using x "
        "to stand for the instance."
    ),
    "validation code": "The validation code specifier runs Python after submission to reject bad input.",
    "dalist": "DAList is a list object with built-in gathering of its items.",
    "dadict": "DADict is a dictionary object with built-in gathering of its keys and values.",
    "daobject": "DAObject is the base class of interview objects and tracks each instance's name.",
    "individual": "Individual represents a person, with a name, address and contact attributes.",
    "person": "Person represents a person or organization with a name and address.",
}


def lookup_definition(term: str) -> str | None:
    return TERM_DEFINITIONS.get(term.strip().lower())
