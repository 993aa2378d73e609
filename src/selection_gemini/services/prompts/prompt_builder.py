"""Prompt Builder - Renders the instruction sent to Gemini for each task."""

from selection_gemini.core import TaskKind


SUMMARIZE_JA_TEMPLATE = """以下のテキスト全体の要点を、日本語で簡潔に要約してください。

**要約のポイント:**
* テキストの主要なメッセージ、結論、または最も重要な情報を捉えてください。
* **もしテキストがソフトウェア開発に関連する場合、** 重要な技術的ポイント、決定事項、またはアクションアイテムがあれば、それらが明確にわかるように含めてください。
* 読み手が短時間で内容を理解できるように、情報を整理してください（箇条書きも可）。
* 応答には要約文**のみ**を含め、導入や個人的なコメントは一切含めないでください。

要約するテキスト:

{text}"""

TRANSLATE_TO_EN_TEMPLATE = """Act as a software engineer translating Japanese text for an English-speaking colleague. Translate the following text accurately, preserving the original meaning and nuance.

**Guideline for Technical Terms:**
* **Use precise engineering vocabulary (e.g., merge, deploy, commit, PR) ONLY IF the Japanese text explicitly mentions or clearly implies these specific software development actions.**
* **Do NOT insert technical jargon if the source text is general conversation, feedback, project status updates, or doesn't relate to specific code/deployment changes.** The goal is natural communication.
* Prioritize a translation that sounds natural for communication between colleagues based *on the source text*.
* Use common abbreviations like 'PR' for 'pull request' when appropriate technical terms are used based on the above guideline.

Output only the translated English text:

{text}"""

TRANSLATE_TO_JA_TEMPLATE = """Translate the following English text into natural-sounding Japanese. Adapt the tone and vocabulary appropriately based on the context of the source text.

**Guidelines:**
* **If the English text clearly discusses software development concepts or actions,** use appropriate Japanese technical terms (e.g., マージ, デプロイ, コミット, プルリク) where natural and suitable for communication between colleagues.
* **If the English text is more general (e.g., conversation, feedback, project updates),** translate it naturally into standard Japanese without forcing technical jargon.
* Your response must contain *only* the translated Japanese text. Do not include explanations, greetings, or alternatives.

Translate the following English text:

{text}"""

PROMPT_TEMPLATES: dict[TaskKind, str] = {
    TaskKind.SUMMARIZE_JA: SUMMARIZE_JA_TEMPLATE,
    TaskKind.TRANSLATE_TO_EN: TRANSLATE_TO_EN_TEMPLATE,
    TaskKind.TRANSLATE_TO_JA: TRANSLATE_TO_JA_TEMPLATE,
}


def build_prompt(task: TaskKind, input_text: str) -> str:
    """
    Render the prompt for a task.

    Pure: the same task and input always produce the same string. The input
    is embedded verbatim at the end of the template.

    Args:
        task: Which command is running.
        input_text: Selected text, already trimmed.

    Returns:
        Prompt string ready for the model invoker.
    """
    return PROMPT_TEMPLATES[task].format(text=input_text)
