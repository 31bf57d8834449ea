import logging

from flask import Flask, request, jsonify
from flask_cors import CORS

from chat_model import ChatModel
from errors import AskError, ValidationError
from prompting import build_messages, rows_to_csv, select_row_window
from settings import Settings
from sheet_source import ServiceAccountIdentity, SheetsReader


class QuestionAnsweringHandler:
    """Answers a question from a window of sheet rows via the chat model."""

    def __init__(self, settings, sheet_reader, chat_model, logger=None):
        self.settings = settings
        self.sheet_reader = sheet_reader
        self.chat_model = chat_model
        self.logger = logger or logging.getLogger(__name__)

    def answer(self, question, spreadsheet_id=None, sheet_range=None):
        sheet_id = spreadsheet_id or self.settings.sheet_id
        sheet_range = sheet_range or self.settings.sheet_range

        rows = self.sheet_reader.fetch_rows(sheet_id, sheet_range) or []
        send_rows = select_row_window(rows)
        self.logger.info("Sending %d of %d rows to the model", len(send_rows), len(rows))

        messages = build_messages(rows_to_csv(send_rows), question)
        return self.chat_model.complete(messages)


def parse_ask_body(data):
    if not isinstance(data, dict):
        data = {}

    question = data.get("question")
    if question is None or question == "":
        raise ValidationError("Missing question")
    if not isinstance(question, str):
        question = str(question)

    spreadsheet_id = data.get("spreadsheetId")
    sheet_range = data.get("range")
    return (
        question,
        spreadsheet_id if isinstance(spreadsheet_id, str) and spreadsheet_id else None,
        sheet_range if isinstance(sheet_range, str) and sheet_range else None,
    )


def create_app(settings=None, sheet_reader=None, chat_model=None):
    """
    Build the Flask app.

    Collaborators passed here are reused for every request; anything left as
    None is built from the environment on each request.
    """
    app = Flask(__name__)
    CORS(app)

    def build_handler():
        current = settings or Settings.from_env()
        reader = sheet_reader or SheetsReader(ServiceAccountIdentity(current.service_account_json))
        model = chat_model or ChatModel.from_settings(current)
        return QuestionAnsweringHandler(current, reader, model, logger=app.logger)

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({"error": "Method not allowed"}), 405

    @app.get("/health")
    def health():
        return jsonify({"ok": True}), 200

    # OPTIONS is left to the 405 handler like every other non-POST method
    @app.route("/ask", methods=["POST"], provide_automatic_options=False)
    @app.route("/api/ask", methods=["POST"], provide_automatic_options=False)
    def ask():
        try:
            question, spreadsheet_id, sheet_range = parse_ask_body(request.get_json(silent=True))
            answer = build_handler().answer(question, spreadsheet_id, sheet_range)
        except AskError as e:
            if e.status_code >= 500:
                app.logger.exception("API error")
            return jsonify({"error": e.message}), e.status_code
        except Exception as e:
            app.logger.exception("API error")
            return jsonify({"error": str(e) or e.__class__.__name__}), 500

        return jsonify({"answer": answer}), 200

    return app


app = create_app()

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app.run(host="0.0.0.0", port=Settings.from_env().port)
