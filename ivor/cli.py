from __future__ import annotations
import typer
from rich import print, print_json
from rich.markup import escape
from .config_loader import load_config
from .utils.logging import setup_logging

app = typer.Typer(no_args_is_help=True)

resources_app = typer.Typer(no_args_is_help=True)
app.add_typer(resources_app, name="resources")


def _store(config):
    from .resources.factory import build_store
    return build_store(load_config(config).store)


def _print_resources(resources, intro: str = "", as_json: bool = False):
    from .resources.formatter import format_resources
    if as_json:
        print_json(data=[r.model_dump() for r in resources], ensure_ascii=False)
    else:
        print(escape(format_resources(resources, intro)))


@app.callback()
def main():
    setup_logging()


@app.command()
def health(config: str = typer.Option(None, "--config", "-c")):
    """Check config, resource store and Supabase availability."""
    cfg = load_config(config)
    print("[green]Config: ok[/green]")
    try:
        from .resources.factory import build_store
        store = build_store(cfg.store)
        cats = store.categories()
        print(f"[green]Resource store ({cfg.store.backend}): ok[/green] - {len(cats)} categories")
    except Exception as e:
        print(f"[red]Resource store check failed: {e}[/red]")
    if cfg.conversation.log_conversations:
        print(f"[cyan]Conversation log: {cfg.conversation.conversations_table}[/cyan]")
    ttl = cfg.sessions.ttl_s
    print(f"[cyan]Session expiry:[/cyan] {f'{ttl:g}s' if ttl else 'off'}")


@app.command("classify")
def classify_cmd(text: str = typer.Argument(...)):
    """Run the distress classifier on a message."""
    from .safety.distress import classify
    sig = classify(text)
    colour = {"critical": "red", "high": "red", "medium": "yellow"}.get(sig.level, "green")
    print(f"[{colour}]level: {sig.level}[/{colour}]")
    print("  indicators:", ", ".join(sig.indicators) or "-")
    print("  immediate_response:", sig.immediate_response)
    print("  follow_up_required:", sig.follow_up_required)


@resources_app.command("search")
def resources_search(
    query: str = typer.Argument(...),
    config: str = typer.Option(None, "--config", "-c"),
    limit: int = typer.Option(5, "--limit", "-n"),
    as_json: bool = typer.Option(False, "--json"),
):
    """Free-text search over title, description, content and keywords."""
    _print_resources(_store(config).search(query, limit), as_json=as_json)


@resources_app.command("category")
def resources_category(
    name: str = typer.Argument(None),
    config: str = typer.Option(None, "--config", "-c"),
    limit: int = typer.Option(5, "--limit", "-n"),
    as_json: bool = typer.Option(False, "--json"),
):
    """Resources in a category. Without a name, list the categories."""
    store = _store(config)
    if not name:
        for c in store.categories():
            print(f"{c.icon or ' '} [bold]{c.name}[/bold] [dim]{c.description or ''}[/dim]")
        return
    _print_resources(store.by_category(name, limit), as_json=as_json)


@resources_app.command("crisis")
def resources_crisis(
    config: str = typer.Option(None, "--config", "-c"),
    as_json: bool = typer.Option(False, "--json"),
):
    """Crisis, emergency and 24/7 resources."""
    from .conversation.router import CRISIS_INTRO
    _print_resources(_store(config).crisis_resources(), CRISIS_INTRO, as_json=as_json)


@app.command("chat")
def chat_cmd(
    config: str = typer.Option(None, "--config", "-c"),
    session_id: str = typer.Option("local", "--session"),
):
    """Start a text conversation with IVOR. Type 'quit' to exit."""
    from rich.console import Console
    from rich.panel import Panel
    from .conversation.engine import ConversationEngine

    console = Console()
    cfg = load_config(config)

    console.print(Panel.fit(
        "[bold magenta]I.V.O.R.[/bold magenta]\n"
        "[dim]Intelligent Virtual Organizing Resource. Type 'quit' to exit.[/dim]",
        border_style="magenta",
    ))

    engine = ConversationEngine.from_config(cfg)
    console.print(f"\n[bold green]IVOR:[/bold green] {escape(engine.greeting())}\n")

    while True:
        try:
            user_input = console.input("[bold blue]You:[/bold blue] ").strip()
        except (EOFError, KeyboardInterrupt):
            console.print("\n[dim]Session ended.[/dim]")
            break
        if not user_input:
            continue
        if user_input.lower() in ("quit", "exit", "bye"):
            console.print("\n[bold green]IVOR:[/bold green] Take care of yourself. Support is always here.")
            break

        result = engine.turn(user_input, session_id, device_type="cli")
        style = "bold red" if result.emergency else "bold green"
        console.print(f"\n[{style}]IVOR:[/{style}] {escape(result.reply)}")
        console.print(
            f"[dim]  \\[distress: {result.distress_level} | service: {result.service or '-'}][/dim]\n"
        )
