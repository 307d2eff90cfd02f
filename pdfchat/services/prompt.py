PROMPT_TEMPLATE = """Based on the content of the document provided below and your own extended research, answer the user's question.
Your response should be based strictly on the information area within the text.
If the answer cannot be found in the document, you must state: "The answer to this question is not found in the document but this is from my own understanding", then try to answer the question by staying in relation to the subject matter.

--- Document Content ---
{document_text}
--- End Document Content ---

User's Question: "{question}\""""


def build_prompt(document_text: str, question: str) -> str:
    """Embed the document text and the verbatim question in the QA template"""
    return PROMPT_TEMPLATE.format(document_text=document_text, question=question)
