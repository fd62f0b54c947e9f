import logging

import requests
from pwinput import pwinput

from passguard.api_check import pwned_count
from passguard.config import Config
from passguard.errors import InvalidInput, InvalidRequest
from passguard.heuristic import HeuristicResult, ZxcvbnScorer
from passguard.password_utils import generate_password
from passguard.strength import StrengthEvaluator, StrengthReport, assess, requirement_checklist


def ask_secret(prompt: str) -> str:
    # maschează cu ***** și merge și în IDE-uri
    return pwinput(prompt)


def show_menu():
    print("\n=== PASSWORD STRENGTH CHECKER ===")
    print("1. Verifică o parolă")
    print("2. Generează o parolă puternică")
    print("3. Verifică parola în HIBP")
    print("9. Ieșire")


def confirm(prompt: str, default: bool = True) -> bool:
    suffix = "[DA/nu]" if default else "[da/NU]"
    ans = input(f"{prompt} {suffix}: ").strip().lower()
    if not ans:
        return default
    return ans in ("da", "d", "yes", "y")


def print_report(
    password: str,
    heuristic: HeuristicResult,
    report: StrengthReport,
    min_length: int = Config.POLICY_MIN_LENGTH,
):
    print(f"\nTărie   : {report.category.value} (scor {report.heuristic_score}/4)")
    print(f"Entropie: {report.entropy_bits} biți")
    if heuristic.crack_time_display:
        print(f"Timp de spargere: {heuristic.crack_time_display}")
    if heuristic.warning:
        print(f"⚠️  {heuristic.warning}")

    if report.rule_violations:
        print("Reguli încălcate:")
        for v in report.rule_violations:
            print(f"  - [{v.rule.value}] {v.message}")
    else:
        print("✅ Respectă toate regulile de politică.")

    if report.suggestions:
        print("Sugestii:")
        for s in report.suggestions:
            print(f"  * {s}")

    print("Criterii:")
    for label, ok in requirement_checklist(password, report.heuristic_score, min_length):
        print(f"  [{'x' if ok else ' '}] {label}")


def main():
    scorer = ZxcvbnScorer()
    evaluator = StrengthEvaluator(min_length=Config.POLICY_MIN_LENGTH, max_length=Config.POLICY_MAX_LENGTH)

    while True:
        show_menu()
        choice = input("Alege opțiunea: ").strip()

        if choice == "1":
            pwd = ask_secret("Parola: ")
            try:
                heuristic, report = assess(pwd, scorer, evaluator)
            except InvalidInput:
                print("Introdu o parolă.")
                continue
            print_report(pwd, heuristic, report, evaluator.min_length)

        elif choice == "2":
            try:
                length_str = input(f"Lungime (implicit {Config.DEFAULT_PASSWORD_LENGTH}): ").strip()
                length = int(length_str) if length_str else Config.DEFAULT_PASSWORD_LENGTH
            except ValueError:
                length = Config.DEFAULT_PASSWORD_LENGTH

            try:
                pwd = generate_password(
                    length=length,
                    upper=confirm("Litere mari (A-Z)?"),
                    lower=confirm("Litere mici (a-z)?"),
                    digits=confirm("Cifre (0-9)?"),
                    symbols=confirm("Simboluri (!@#$)?"),
                )
            except InvalidRequest as e:
                print(f"Nu pot genera parola: {e}")
                continue

            print(f"\nParolă generată: {pwd}")
            heuristic, report = assess(pwd, scorer, evaluator)
            print_report(pwd, heuristic, report, evaluator.min_length)

        elif choice == "3":
            pwd = ask_secret("Parola: ")
            if not pwd:
                print("Introdu o parolă.")
                continue
            try:
                count = pwned_count(pwd)
            except requests.RequestException as e:
                print(f"⚠️ Nu am putut verifica HIBP acum: {e}")
                continue
            if count > 0:
                print(f"⚠️ Atenție: parola apare în breach-uri publice de {count} ori!")
            else:
                print("✅ Nu apare în HIBP.")

        elif choice == "9":
            print("Bye 👋")
            break

        else:
            print("Opțiune invalidă.")


if __name__ == "__main__":
    logging.basicConfig(level=Config.LOG_LEVEL)
    main()
