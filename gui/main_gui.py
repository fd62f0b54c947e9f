# gui/main_gui.py
import logging
import threading
import tkinter as tk
from tkinter import ttk, messagebox

import requests

from passguard.api_client import PasswordApiClient, check_with_fallback
from passguard.config import Config
from passguard.errors import InvalidInput
from passguard.heuristic import ZxcvbnScorer
from passguard.strength import StrengthEvaluator, assess, category_for_score, report_to_dict, requirement_checklist


class App(tk.Tk):
    def __init__(self):
        super().__init__()
        self.title("Password Strength Checker 🔐")
        self.geometry("720x640")
        self.minsize(660, 600)

        # back-end
        self.client = PasswordApiClient()
        self.scorer = ZxcvbnScorer()
        self.evaluator = StrengthEvaluator(
            min_length=Config.POLICY_MIN_LENGTH, max_length=Config.POLICY_MAX_LENGTH
        )

        # ultimul scor cunoscut (local sau de la server); None = nimic introdus
        self._score: int | None = None
        self._checking = False

        self.create_widgets()
        self.update_local_analysis()

    # ---------- UI -------------------------------------------------

    def create_widgets(self):
        pad = {"padx": 10, "pady": 6}

        # === VERIFICARE ===
        frm_check = ttk.LabelFrame(self, text="Verifică parola (nu se salvează nicăieri)")
        frm_check.pack(fill="x", **pad)

        self.pw_var = tk.StringVar()
        self.pw_entry = ttk.Entry(frm_check, textvariable=self.pw_var, show="*", font=("Courier New", 12))
        self.pw_entry.grid(row=0, column=0, columnspan=3, sticky="ew", padx=8, pady=(8, 4))
        self.pw_entry.bind("<KeyRelease>", lambda e: self.update_local_analysis())

        self.show_var = tk.BooleanVar(value=False)
        ttk.Checkbutton(frm_check, text="Arată parola", variable=self.show_var,
                        command=self.toggle_show).grid(row=1, column=0, sticky="w", padx=8)
        ttk.Button(frm_check, text="Copy", command=lambda: self.secure_copy(self.pw_var.get())).grid(
            row=1, column=1, sticky="e")
        self._btn_check = ttk.Button(frm_check, text="Verifică pe server", command=self.check_password)
        self._btn_check.grid(row=1, column=2, sticky="e", padx=8)
        frm_check.columnconfigure(0, weight=1)

        # === REZULTAT ===
        frm_res = ttk.Frame(self)
        frm_res.pack(fill="x", padx=12)
        ttk.Label(frm_res, text="Tărie:").grid(row=0, column=0, sticky="w")
        self.strength_lbl = ttk.Label(frm_res, text="—", font=("TkDefaultFont", 10, "bold"))
        self.strength_lbl.grid(row=0, column=1, sticky="w", padx=(6, 18))
        ttk.Label(frm_res, text="Entropie:").grid(row=0, column=2, sticky="w")
        self.entropy_lbl = ttk.Label(frm_res, text="0.00 biți")
        self.entropy_lbl.grid(row=0, column=3, sticky="w", padx=(6, 18))
        ttk.Label(frm_res, text="Timp de spargere:").grid(row=0, column=4, sticky="w")
        self.crack_lbl = ttk.Label(frm_res, text="—")
        self.crack_lbl.grid(row=0, column=5, sticky="w", padx=(6, 0))

        # scor 0..4 -> 0..100
        self.str_bar = ttk.Progressbar(frm_res, orient="horizontal", length=640, mode="determinate", maximum=100)
        self.str_bar.grid(row=1, column=0, columnspan=6, sticky="ew", pady=(6, 0))

        self.details = tk.Text(self, height=9, wrap="word", state="disabled", padx=8, pady=6)
        self.details.pack(fill="both", expand=True, padx=12, pady=(8, 0))

        # === CRITERII ===
        frm_crit = ttk.LabelFrame(self, text="Criterii")
        frm_crit.pack(fill="x", **pad)
        self._criteria_lbls = []
        for i in range(5):
            lbl = ttk.Label(frm_crit, text="")
            lbl.grid(row=i // 2, column=i % 2, sticky="w", padx=8, pady=2)
            self._criteria_lbls.append(lbl)

        # === GENERATOR ===
        frm_gen = ttk.LabelFrame(self, text="Generează o parolă puternică")
        frm_gen.pack(fill="x", **pad)

        ttk.Label(frm_gen, text="Lungime:").grid(row=0, column=0, sticky="w", padx=8)
        self.length_var = tk.IntVar(value=Config.DEFAULT_PASSWORD_LENGTH)
        ttk.Spinbox(frm_gen, from_=Config.MIN_PASSWORD_LENGTH, to=Config.MAX_PASSWORD_LENGTH,
                    textvariable=self.length_var, width=6).grid(row=0, column=1, sticky="w")

        self.upper_var = tk.BooleanVar(value=True)
        self.lower_var = tk.BooleanVar(value=True)
        self.numbers_var = tk.BooleanVar(value=True)
        self.symbols_var = tk.BooleanVar(value=True)
        for col, (text, var) in enumerate(
            (("A-Z", self.upper_var), ("a-z", self.lower_var), ("0-9", self.numbers_var), ("!@#$", self.symbols_var)),
            start=2,
        ):
            ttk.Checkbutton(frm_gen, text=text, variable=var).grid(row=0, column=col, padx=6)

        ttk.Button(frm_gen, text="Generează", command=self.generate_password).grid(row=0, column=6, padx=8)

        self.generated_var = tk.StringVar()
        ttk.Entry(frm_gen, textvariable=self.generated_var, state="readonly", font=("Courier New", 12)).grid(
            row=1, column=0, columnspan=6, sticky="ew", padx=8, pady=(6, 8))
        ttk.Button(frm_gen, text="Copy", command=lambda: self.secure_copy(self.generated_var.get())).grid(
            row=1, column=6, padx=8, pady=(6, 8))
        frm_gen.columnconfigure(5, weight=1)

        self.status = ttk.Label(self, text="—", anchor="w")
        self.status.pack(side="bottom", fill="x", padx=8, pady=(0, 6))

    def toggle_show(self):
        self.pw_entry.config(show="" if self.show_var.get() else "*")

    # ---------- Analiză --------------------------------------------

    def update_local_analysis(self):
        """Feedback instant, local, la fiecare tastă."""
        pwd = self.pw_var.get()
        if not pwd:
            self._score = None
            self.show_result(None)
            return
        heuristic, report = assess(pwd, self.scorer, self.evaluator)
        self.show_result(report_to_dict(heuristic, report))

    def show_result(self, result: dict | None):
        if result is None:
            self.strength_lbl.config(text="—")
            self.entropy_lbl.config(text="0.00 biți")
            self.crack_lbl.config(text="—")
            self.str_bar["value"] = 0
            self._set_details("")
        else:
            self._score = result["score"]
            self.strength_lbl.config(text=category_for_score(result["score"]).value)
            self.entropy_lbl.config(text=f"{result['entropy']:.2f} biți")
            self.crack_lbl.config(text=result.get("crackTime") or "—")
            self.str_bar["value"] = result["score"] * 25

            lines = []
            warning = (result.get("feedback") or {}).get("warning")
            if warning:
                lines.append(f"⚠️ {warning}\n")
            if result.get("suggestions"):
                lines.append("Sugestii:")
                lines.extend(f"  • {s}" for s in result["suggestions"])
            if result.get("pwnedCount"):
                lines.append(f"\n⚠️ Apare în breach-uri publice de {result['pwnedCount']} ori!")
            self._set_details("\n".join(lines))

        checks = requirement_checklist(self.pw_var.get(), self._score, self.evaluator.min_length)
        for lbl, (text, ok) in zip(self._criteria_lbls, checks):
            lbl.config(text=f"{'✅' if ok else '▫️'} {text}")

    def _set_details(self, text: str):
        self.details.config(state="normal")
        self.details.delete("1.0", "end")
        self.details.insert("end", text)
        self.details.config(state="disabled")

    def check_password(self):
        pwd = self.pw_var.get()
        if not pwd:
            messagebox.showwarning("Atenție", "Introdu o parolă.")
            return
        if self._checking:
            return

        self._checking = True
        self._btn_check.config(text="Se verifică…", state="disabled")

        def worker():
            try:
                result, local_only = check_with_fallback(pwd, self.client, self.scorer, self.evaluator)
            except InvalidInput:
                result, local_only = None, True
            self.after(0, lambda: self._on_checked(pwd, result, local_only))

        threading.Thread(target=worker, daemon=True).start()

    def _on_checked(self, pwd: str, result: dict | None, local_only: bool):
        self._checking = False
        self._btn_check.config(text="Verifică pe server", state="normal")
        # userul a tastat între timp -> rezultatul nu mai e relevant
        if pwd != self.pw_var.get() or result is None:
            return
        self.show_result(result)
        if local_only:
            self.status.config(text="Nu am putut contacta serverul. Folosesc doar analiza locală.")
        else:
            self.status.config(text="Verificat pe server.")

    # ---------- Generator ------------------------------------------

    def generate_password(self):
        try:
            length = int(self.length_var.get())
        except (tk.TclError, ValueError):
            length = Config.DEFAULT_PASSWORD_LENGTH

        options = dict(
            length=length,
            uppercase=self.upper_var.get(),
            lowercase=self.lower_var.get(),
            numbers=self.numbers_var.get(),
            symbols=self.symbols_var.get(),
        )

        def worker():
            try:
                pwd = self.client.generate_password(**options)
            except requests.RequestException as e:
                msg = f"Nu am putut genera parola. Încearcă din nou.\n{e}"
                self.after(0, lambda: messagebox.showerror("Eroare", msg))
                return
            self.after(0, lambda: self._on_generated(pwd))

        threading.Thread(target=worker, daemon=True).start()

    def _on_generated(self, pwd: str):
        self.generated_var.set(pwd)
        self.pw_var.set(pwd)
        self.update_local_analysis()

    # -------- Password helpers --------
    def secure_copy(self, text: str, seconds: int = 15):
        """Copiază în clipboard și îl curăță automat după N secunde."""
        if not text:
            return
        self.clipboard_clear()
        self.clipboard_append(text)
        self.update()
        self.status.config(text=f"Parolă copiată în clipboard ({seconds}s)")

        def _clear():
            # dacă între timp userul a copiat altceva, nu-l ștergem
            try:
                if self.clipboard_get() == text:
                    self.clipboard_clear()
                    self.update()
            except tk.TclError:
                pass
            self.status.config(text="Clipboard curățat.")
        self.after(seconds * 1000, _clear)


if __name__ == "__main__":
    logging.basicConfig(level=Config.LOG_LEVEL)
    app = App()
    app.mainloop()
