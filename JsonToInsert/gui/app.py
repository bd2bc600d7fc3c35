# Contains the tkinter window
import logging
import tkinter as tk
from concurrent.futures import ThreadPoolExecutor
from tkinter import filedialog, messagebox, ttk

from ..config import ConfigManager
from ..core.errors import IoError
from .controller import ConversionController

logger = logging.getLogger(__name__)


class JsonToInsertApp:
    def __init__(self, master, config_mgr=None):
        self.master = master
        self.master.title("JSON to SQL Converter")
        self.master.geometry("800x400")

        self.config_mgr = config_mgr or ConfigManager()
        self.controller = ConversionController(self.config_mgr)

        self.table_name = tk.StringVar()
        self.file_label = tk.StringVar(value="No file selected")
        self.status = tk.StringVar(value="Open a JSON file to begin.")

        # One worker: conversions never run concurrently
        self.executor = ThreadPoolExecutor(max_workers=1)

        self.setup_button_styles()
        self.build_ui()
        self.master.protocol("WM_DELETE_WINDOW", self.safe_exit)

    def setup_button_styles(self):
        style = ttk.Style()
        style.configure('LightBlue.TButton',
                        background='#ADD8E6',
                        foreground='black',
                        padding=(6, 3),
                        relief='flat',
                        borderwidth=1,
                        focuscolor='none')
        style.map('LightBlue.TButton',
                  background=[('active', '#87CEEB'),
                              ('pressed', '#87CEFA')])

    def build_ui(self):
        frame = ttk.Frame(self.master, padding="40")
        frame.pack(fill=tk.BOTH, expand=True)

        ttk.Label(frame, text="Table name:").pack(anchor=tk.W)
        self.table_entry = ttk.Entry(frame, textvariable=self.table_name, width=50)
        self.table_entry.pack(fill=tk.X, pady=(5, 30))

        file_row = ttk.Frame(frame)
        file_row.pack(fill=tk.X, pady=(0, 30))
        self.open_button = ttk.Button(file_row, text="Open JSON File", style='LightBlue.TButton',
                                      command=self.browse_file)
        self.open_button.pack(side=tk.LEFT)
        ttk.Label(file_row, textvariable=self.file_label, foreground='gray').pack(side=tk.LEFT, padx=(15, 0))

        button_row = ttk.Frame(frame)
        button_row.pack(anchor=tk.W)
        self.convert_button = ttk.Button(button_row, text="Convert", style='LightBlue.TButton',
                                         command=self.convert, state="disabled")
        self.convert_button.pack(side=tk.LEFT)
        self.clear_button = ttk.Button(button_row, text="Clear", style='LightBlue.TButton',
                                       command=self.clear_data, state="disabled")
        self.clear_button.pack(side=tk.LEFT, padx=(15, 0))

        ttk.Label(frame, textvariable=self.status, foreground='gray').pack(side=tk.BOTTOM, anchor=tk.W)

    def browse_file(self):
        filetypes = [("JSON Files", "*.json"), ("All Files", "*.*")]
        selected_path = filedialog.askopenfilename(title="Open JSON File", filetypes=filetypes,
                                                   initialdir=self.controller.initial_directory)
        if not selected_path:
            return

        try:
            suggested = self.controller.load_file(selected_path)
        except IoError as e:
            messagebox.showerror("Unable to Open File", str(e))
            return

        self.file_label.set(selected_path)
        if suggested:
            self.table_name.set(suggested)
        self.convert_button.config(state="normal")
        self.status.set("Ready to convert.")
        self.clear_button.config(state="normal")

    def clear_data(self):
        """Forget the loaded file and reset the form"""
        self.controller.clear()
        self.table_name.set("")
        self.file_label.set("No file selected")
        self.convert_button.config(state="disabled")
        self.clear_button.config(state="disabled")
        self.status.set("Open a JSON file to begin.")

    def convert(self):
        table_name = self.table_name.get()
        self.convert_button.config(state="disabled")
        self.status.set("Converting...")

        def convert_task():
            try:
                message = self.controller.convert(table_name)
            except Exception:
                logger.exception("Unexpected error during conversion")
                self.master.after(0, lambda: self.show_unexpected_error())
                return
            self.master.after(0, lambda: self.show_message(message))

        self.executor.submit(convert_task)

    def show_message(self, message):
        self.convert_button.config(state="normal")
        self.status.set(message.text)
        if message.kind == "info":
            messagebox.showinfo(message.title, message.text)
        else:
            messagebox.showerror(message.title, message.text)

    def show_unexpected_error(self):
        self.convert_button.config(state="normal")
        self.status.set("Conversion failed.")
        messagebox.showerror("Conversion Failed", "An unexpected error occurred. See the log for details.")

    def safe_exit(self):
        """Shut down the worker and close the window."""
        self.executor.shutdown(wait=False)
        self.master.quit()
        self.master.destroy()


def run(config_mgr=None):
    root = tk.Tk()
    JsonToInsertApp(root, config_mgr=config_mgr)
    root.mainloop()
