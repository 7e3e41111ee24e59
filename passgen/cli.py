import logging

from pwinput import pwinput
from rich.console import Console
from rich.markup import escape

from passgen.config import Config
from passgen.errors import PasswordGeneratorError
from passgen.generator import GenerationRequest, PasswordGenerator
from passgen.strength import (
    MEDIUM,
    STRONG,
    VERY_STRONG,
    VERY_WEAK,
    WEAK,
    PasswordStrength,
    analyze_password,
)

console = Console(highlight=False, emoji=False)

LEVEL_STYLES = {
    VERY_WEAK: "dark_red",
    WEAK: "red",
    MEDIUM: "yellow",
    STRONG: "green",
    VERY_STRONG: "cyan",
}

RULE = "═" * 70


def show_header():
    console.print("[cyan]╔══════════════════════════════════════════════╗[/cyan]")
    console.print("[cyan]║   PASSWORD GENERATOR                         ║[/cyan]")
    console.print("[cyan]║   • Dictionary attack protection             ║[/cyan]")
    console.print("[cyan]║   • Entropy estimation                       ║[/cyan]")
    console.print("[cyan]║   • Look-alike character filtering           ║[/cyan]")
    console.print("[cyan]╚══════════════════════════════════════════════╝[/cyan]")
    print()


def show_menu():
    print("\n=== MAIN MENU ===")
    print("1. Generate a password")
    print("2. Generate several passwords")
    print("3. Test an existing password")
    print("4. Exit")


def level_style(level: str) -> str:
    return LEVEL_STYLES.get(level, "white")


def get_int_input(prompt: str, minimum: int, maximum: int, default=None) -> int:
    """
    Asks until the user types an integer in [minimum, maximum].
    An empty answer picks `default` when one is given.
    """
    while True:
        raw = input(prompt).strip()
        if not raw and default is not None:
            return default
        try:
            value = int(raw)
        except ValueError:
            value = None
        if value is not None and minimum <= value <= maximum:
            return value
        console.print(f"[red]❌ Enter a number between {minimum} and {maximum}.[/red]")


def ask_yes_no(prompt: str) -> bool:
    while True:
        ans = input(f"{prompt} [y/n]: ").strip().lower()
        if ans in ("y", "yes"):
            return True
        if ans in ("n", "no"):
            return False
        console.print("[red]❌ Please answer 'y' or 'n'.[/red]")


def ask_request(length: int) -> GenerationRequest:
    print("\n--- Character types ---")
    return GenerationRequest.from_flags(
        length,
        upper=ask_yes_no("Uppercase letters (A-Z)?"),
        lower=ask_yes_no("Lowercase letters (a-z)?"),
        digits=ask_yes_no("Digits (0-9)?"),
        special=ask_yes_no("Special characters (!@#$%...)?"),
        exclude_ambiguous=ask_yes_no("Exclude look-alike characters (0/O, 1/l/I)?"),
    )


def display_strength(password: str, strength: PasswordStrength):
    style = level_style(strength.level)

    console.print(RULE)
    console.print(f"  [yellow]PASSWORD: {escape(password)}[/yellow]")
    console.print(RULE)

    print("\n📊 DETAILED ANALYSIS:")
    console.print(f"  Strength: [{style}]{strength.level} ({strength.score}/10)[/{style}]")
    print(f"  Length: {strength.length} characters")
    print(f"  Entropy: {strength.entropy:.2f} bits")
    print(f"  Estimated crack time: {strength.crack_time}")

    print("\n  Characters:")
    print(f"    Uppercase: {'yes' if strength.has_uppercase else 'no'}")
    print(f"    Lowercase: {'yes' if strength.has_lowercase else 'no'}")
    print(f"    Digits:    {'yes' if strength.has_digits else 'no'}")
    print(f"    Special:   {'yes' if strength.has_special else 'no'}")

    if strength.contains_weak_pattern:
        console.print("\n  [red]⚠️  Common word or sequential pattern detected![/red]")

    print("\n💡 SUGGESTIONS:")
    hints = strength.suggestions
    if not hints:
        console.print("  [green]✓ Looks good, nothing to improve.[/green]")
    for hint in hints:
        print(f"  • {hint}")
    console.print(RULE)


def generate_single(generator: PasswordGenerator):
    length = get_int_input(
        f"Length ({Config.MIN_LENGTH}-{Config.MAX_LENGTH}, default {Config.DEFAULT_LENGTH}): ",
        Config.MIN_LENGTH, Config.MAX_LENGTH, default=Config.DEFAULT_LENGTH,
    )
    request = ask_request(length)
    password = generator.generate(request)
    display_strength(password, analyze_password(password))


def generate_several(generator: PasswordGenerator):
    count = get_int_input(f"How many passwords (1-{Config.MAX_BATCH}): ", 1, Config.MAX_BATCH)
    length = get_int_input(
        f"Length ({Config.MIN_LENGTH}-{Config.MAX_LENGTH}, default {Config.DEFAULT_LENGTH}): ",
        Config.MIN_LENGTH, Config.MAX_LENGTH, default=Config.DEFAULT_LENGTH,
    )
    request = ask_request(length)
    passwords = generator.generate_batch(request, count)

    console.print(f"\n[green]✓ Generated {count} passwords.[/green]")
    console.print(RULE)
    for i, password in enumerate(passwords, start=1):
        level = analyze_password(password).level
        style = level_style(level)
        console.print(f"{i:>2}. [yellow]{escape(password):<40}[/yellow] [{style}]\\[{level}][/{style}]")
    console.print(RULE)


def analyze_existing():
    password = pwinput("Password to test: ")
    if not password.strip():
        console.print("[red]❌ The password cannot be empty.[/red]")
        return
    display_strength(password, analyze_password(password))


def main():
    logging.basicConfig(level=Config.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")
    generator = PasswordGenerator(max_attempts=Config.MAX_ATTEMPTS)

    show_header()
    try:
        while True:
            show_menu()
            choice = input("Choose an option: ").strip()

            try:
                if choice == "1":
                    generate_single(generator)
                elif choice == "2":
                    generate_several(generator)
                elif choice == "3":
                    analyze_existing()
                elif choice == "4":
                    console.print("\n[cyan]👋 Stay safe out there. Bye![/cyan]")
                    break
                else:
                    console.print("[red]❌ Invalid option, pick 1-4.[/red]")
            except PasswordGeneratorError as e:
                console.print(f"\n[red]❌ Error: {escape(str(e))}[/red]")
    except (KeyboardInterrupt, EOFError):
        print("\nBye 👋")


if __name__ == "__main__":
    main()
