"""Interactive CLI application."""
import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.prompt import IntPrompt, Prompt
from rich.table import Table

from mindquiz import config
from mindquiz.dashboard import (
    get_concept_standings, get_readiness_color, get_readiness_label, get_topic_stats,
)
from mindquiz.db import init_db
from mindquiz.feedback import generate_next_steps, generate_overall_feedback, grade_adaptive_quiz
from mindquiz.importer import TopicImportError, import_topic
from mindquiz.models import NO_ANSWER, Question, QuizGrade
from mindquiz.quiz import generate_adaptive_quiz, generate_quiz
from mindquiz.seed import is_seeded, seed_topics
from mindquiz.storage import get_topic, list_topics, load_quiz_history, load_user_model, record_quiz_result

console = Console()
logger = logging.getLogger(__name__)

EXIT_WORDS = ("q", "menu")


class SessionExitRequested(Exception):
    """Raised when the user types q or menu in the middle of a quiz."""


def session_prompt(prompt: str, **kwargs) -> str:
    answer = Prompt.ask(prompt, **kwargs)
    if answer is not None and answer.strip().lower() in EXIT_WORDS:
        raise SessionExitRequested()
    return answer


def show_welcome():
    console.print(Panel(
        "[bold]MindQuiz[/bold]\n[dim]Adaptive quizzes from your topics[/dim]",
        title="Welcome", border_style="blue",
    ))


def show_menu():
    console.print("\n[bold]Commands:[/bold]")
    commands = [
        ("topics", "List stored topics"),
        ("import", "Import a topic file (JSON/YAML)"),
        ("quiz", "Practice quiz"),
        ("adaptive", "Quiz targeted at weak areas"),
        ("history", "Past quiz attempts"),
        ("dashboard", "Concept mastery + progress"),
        ("quit", "Exit"),
    ]
    for cmd, desc in commands:
        console.print(f"  [cyan]{cmd:<14}[/cyan] {desc}")


def ask_answer(question: Question) -> str:
    """Prompt for one answer. An empty reply counts as unanswered."""
    if question.type == "mcq":
        options = question.options or []
        for i, option in enumerate(options, 1):
            console.print(f"  [cyan]{i})[/cyan] {option}")
        reply = session_prompt("\nYour answer (number)", default="").strip()
        if reply.isdigit() and 1 <= int(reply) <= len(options):
            return options[int(reply) - 1]
        return reply
    if question.type == "truefalse":
        return session_prompt("True or false", choices=["true", "false", *EXIT_WORDS], default="").strip()
    if question.guidance:
        console.print(f"[dim]{question.guidance}[/dim]")
    return session_prompt("\nYour answer", default="")


def run_quiz_session(questions: list[Question]) -> list[str]:
    """Ask every question in order and collect the answers."""
    console.print(f"\n[bold]Quiz[/bold] — {len(questions)} questions [dim](q to stop)[/dim]\n")
    answers = []
    for i, q in enumerate(questions, 1):
        label = f" [magenta]{q.focus}[/magenta]" if q.focus else ""
        console.print(f"[bold]Q{i}.[/bold]{label} {q.question}\n")
        answers.append(ask_answer(q))
        console.print()
    return answers


def show_results(grade: QuizGrade) -> None:
    table = Table(title="Results")
    table.add_column("#", justify="right")
    table.add_column("Concept", style="cyan")
    table.add_column("Your answer")
    table.add_column("Credit", justify="right")
    for i, r in enumerate(grade.results, 1):
        color = "green" if r.is_correct else ("yellow" if r.partial_score else "red")
        answer = r.user_answer if r.user_answer != NO_ANSWER else f"[dim]{NO_ANSWER}[/dim]"
        table.add_row(str(i), r.concept_tested, str(answer)[:60], f"[{color}]{r.partial_score}%[/{color}]")
    console.print(table)

    color = get_readiness_color(grade.score)
    overall = generate_overall_feedback(grade.score)
    console.print(f"\n[bold]Score: [{color}]{grade.score}%[/{color}][/bold] "
                  f"({grade.correct}/{grade.total} fully correct, {grade.partial_credit} credit)")
    console.print(f"{overall['message']}")

    for rec in grade.recommended_actions:
        style = "red" if rec.type == "remediation" else "green"
        console.print(f"  [{style}]{rec.reason}[/{style}] — {rec.action}")
    for step in generate_next_steps(grade.score):
        console.print(f"[bold]Next:[/bold] {step['action']} [dim]({step['reason']})[/dim]")


def select_topic(db_path: str) -> str | None:
    names = list_topics(db_path)
    if not names:
        console.print("[yellow]No topics yet. Use 'import' to add one.[/yellow]")
        return None
    for i, name in enumerate(names, 1):
        console.print(f"  [cyan]{i}[/cyan]) {name}")
    choice = Prompt.ask("Select topic", choices=[str(i) for i in range(1, len(names) + 1)])
    return names[int(choice) - 1]


def cmd_topics(db_path: str):
    table = Table(title="Topics")
    table.add_column("Topic", style="cyan")
    table.add_column("Concepts", justify="right")
    for name in list_topics(db_path):
        topic = get_topic(db_path, name)
        table.add_row(name, str(len(topic.concepts)) if topic else "0")
    console.print(table)


def cmd_import(db_path: str):
    file_path = Prompt.ask("File path")
    if not Path(file_path).exists():
        console.print(f"[red]File not found: {file_path}[/red]")
        return
    try:
        result = import_topic(db_path, file_path)
    except TopicImportError as e:
        console.print(f"[red]{e}[/red]")
        return
    console.print(f"[green]Imported {result['filename']} → {result['topic']} "
                  f"({result['concepts']} concepts)[/green]")


def cmd_quiz(db_path: str, user_id: str, adaptive: bool = False):
    topic_name = select_topic(db_path)
    if topic_name is None:
        return
    topic = get_topic(db_path, topic_name)
    count = IntPrompt.ask("Number of questions", default=config.DEFAULT_QUESTION_COUNT)
    user_model = load_user_model(db_path, user_id)
    if adaptive:
        questions = generate_adaptive_quiz(topic, user_model, count)
    else:
        questions = generate_quiz(topic, count)
    if not questions:
        console.print("[yellow]No questions could be generated for this topic.[/yellow]")
        return
    try:
        answers = run_quiz_session(questions)
    except SessionExitRequested:
        console.print("[dim]Quiz stopped. Nothing was recorded.[/dim]")
        return
    grade = grade_adaptive_quiz(questions, answers, user_model)
    show_results(grade)
    record_quiz_result(db_path, user_id, topic.name, grade)
    logger.info("Recorded attempt for %s on %s: %d%%", user_id, topic.name, grade.score)


def cmd_history(db_path: str):
    attempts = load_quiz_history(db_path, limit=20)
    if not attempts:
        console.print("[yellow]No quiz attempts yet.[/yellow]")
        return
    table = Table(title="Recent Attempts")
    table.add_column("When")
    table.add_column("Topic", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("Correct", justify="right")
    for a in attempts:
        color = get_readiness_color(a.score)
        table.add_row((a.timestamp or "")[:16], a.topic, f"[{color}]{a.score}%[/{color}]", f"{a.correct}/{a.total}")
    console.print(table)


def cmd_dashboard(db_path: str, user_id: str):
    topic_name = select_topic(db_path)
    if topic_name is None:
        return
    analysis = get_concept_standings(db_path, user_id, topic_name)
    stats = get_topic_stats(db_path, topic_name)

    proficiency = round(analysis.overall_proficiency * 100)
    color = get_readiness_color(proficiency)
    console.print(Panel(
        f"Overall proficiency: [{color}]{proficiency}% {get_readiness_label(proficiency)}[/{color}]",
        title=topic_name, border_style="blue",
    ))

    table = Table(title="Concept Breakdown")
    table.add_column("Concept", style="cyan")
    table.add_column("Mastery", justify="right")
    table.add_column("Attempts", justify="right")
    table.add_column("Status")
    for label, style, standings in (
        ("weak", "red", analysis.weaknesses),
        ("review", "yellow", analysis.needs_review),
        ("strong", "green", analysis.strengths),
    ):
        for s in standings:
            table.add_row(s.concept, f"{s.mastery_level:.0%}", str(s.performance.attempts), f"[{style}]{label}[/{style}]")
    console.print(table)

    console.print(f"\n  Quizzes: [bold]{stats['attempts']}[/bold]  |  "
                  f"Avg: [bold]{stats['average_score']}%[/bold]  |  "
                  f"Best: [bold]{stats['best_score']}%[/bold]")
    if analysis.weaknesses:
        console.print(f"\n  [yellow]Recommendation: Focus on {analysis.weaknesses[0].concept}[/yellow]")


def configure_logging(level: str = config.LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def main():
    configure_logging()
    db_path = config.DEFAULT_DB_PATH
    user_id = config.DEFAULT_USER_ID
    init_db(db_path)
    first_run = not is_seeded(db_path)
    if first_run:
        console.print("[dim]Setting up for first use...[/dim]")
    seed_topics(db_path)
    if first_run:
        console.print("[green]Ready![/green]\n")

    show_welcome()

    while True:
        show_menu()
        choice = Prompt.ask("\n[bold]>[/bold]", default="adaptive").strip().lower()
        try:
            if choice == "topics":
                cmd_topics(db_path)
            elif choice == "import":
                cmd_import(db_path)
            elif choice == "quiz":
                cmd_quiz(db_path, user_id)
            elif choice == "adaptive":
                cmd_quiz(db_path, user_id, adaptive=True)
            elif choice == "history":
                cmd_history(db_path)
            elif choice == "dashboard":
                cmd_dashboard(db_path, user_id)
            elif choice in ("quit", "exit", "q"):
                console.print("[dim]Keep learning![/dim]")
                break
            else:
                console.print("[red]Unknown command. Try again.[/red]")
        except KeyboardInterrupt:
            console.print("\n[dim]Use 'quit' to exit.[/dim]")
        except Exception as e:
            logger.debug("Command %s failed", choice, exc_info=True)
            console.print(f"[red]Error: {e}[/red]")


if __name__ == "__main__":
    main()
