import argparse
import json
import os
import uuid as _uuid

from config.settings import get_settings
from db import schema
from db.connection import get_connection
from db.repos.applicants_repo import ApplicantsRepo
from pipelines.runner import Pipeline, RunContext
from pipelines.steps import AssembleApplicants, LoadSheetRows, PersistApplicants
from services.reporting import format_applicant, print_summary
from sources.registry import get_document_source
from sources.sheet_csv import SheetCsvSource
from utils.logging_setup import init_logging


def cmd_bootstrap(args):
    conn = get_connection(args.db)
    schema.bootstrap(conn)
    print("Schema ready")


def cmd_ingest(args):
    settings = get_settings()
    if not os.getenv("RUN_ID"):
        os.environ["RUN_ID"] = _uuid.uuid4().hex

    source_name = args.document_source or settings.document_source
    overrides = {}
    if source_name == "local" and args.documents_dir:
        overrides["documents_dir"] = args.documents_dir
    documents = get_document_source(source_name, settings, **overrides)

    rows = SheetCsvSource(args.sheet, sheet_name=args.role, sheet_id=args.sheet_id)
    steps = [
        LoadSheetRows(rows),
        AssembleApplicants(documents, settings, max_workers=args.concurrency),
    ]
    if args.write_db:
        conn = get_connection(args.db)
        schema.bootstrap(conn)

        def _progress(cur, total, email):
            print(f"[{cur}/{total}] Persisted applicant {email}")

        steps.append(PersistApplicants(ApplicantsRepo(conn), on_processed=_progress if args.progress else None))

    ctx = Pipeline(steps).run(RunContext())
    persisted = ctx.meta.get("processed_applicants") if args.write_db else None
    print_summary(ctx.sheet_name or args.role, ctx.applicants, ctx.failures, persisted)

    if args.output:
        out = [a.model_dump(mode="json") for a in ctx.applicants]
        with open(args.output, "w", encoding="utf-8") as f:
            json.dump(out, f, indent=2, ensure_ascii=False)
        print(f"Output File: {args.output}")


def cmd_report_applicant(args):
    conn = get_connection(args.db)
    schema.bootstrap(conn)
    row = ApplicantsRepo(conn).get_by_email(args.email)
    if not row:
        print("No record found for email")
        return
    if args.json:
        print(json.dumps(row, indent=2, ensure_ascii=False))
    else:
        print(format_applicant(row))


def cmd_report_recent(args):
    conn = get_connection(args.db)
    schema.bootstrap(conn)
    out = ApplicantsRepo(conn).list_recent(limit=args.limit, status=args.status)
    print(json.dumps(out, indent=2, ensure_ascii=False))


def main(argv=None):
    settings = get_settings()
    init_logging(settings.log_level)
    parser = argparse.ArgumentParser(description="Applicant intake CLI")
    parser.add_argument("--db", default=settings.db_path, help="Path to SQLite DB (default from settings)")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_boot = sub.add_parser("bootstrap", help="Create tables, indexes and views")
    p_boot.set_defaults(func=cmd_bootstrap)

    p_ing = sub.add_parser("ingest", help="Assemble applicants from an exported sheet CSV")
    p_ing.add_argument("--sheet", required=True, help="Path to the sheet CSV export (header row first)")
    p_ing.add_argument("--role", required=True, help="Role (sheet name) the applicants applied for")
    p_ing.add_argument("--sheet-id", default=None, help="Sheet id (default: CSV file stem)")
    p_ing.add_argument("--documents-dir", default=None, help="Directory of exported resumes/materials (local source)")
    p_ing.add_argument("--document-source", choices=["local", "http"], default=None, help="Document source (default from settings)")
    p_ing.add_argument("--concurrency", type=int, default=None, help="Rows assembled in parallel (default from settings)")
    p_ing.add_argument("--output", "-o", default=None, help="Write assembled applicants as JSON to this path")
    p_ing.add_argument("--write-db", action="store_true", help="Upsert assembled applicants into SQLite")
    p_ing.add_argument("--progress", action="store_true", help="Print progress for each persisted applicant")
    p_ing.set_defaults(func=cmd_ingest)

    p_ra = sub.add_parser("report-applicant", help="Show the stored record for an applicant email")
    p_ra.add_argument("--email", required=True, help="Applicant email address")
    p_ra.add_argument("--json", action="store_true", help="Print the full row as JSON")
    p_ra.set_defaults(func=cmd_report_applicant)

    p_rr = sub.add_parser("report-recent", help="List recent applicants from the triage view")
    p_rr.add_argument("--limit", type=int, default=5)
    p_rr.add_argument("--status", default=None, help="Filter: exact status (e.g. 'Needs to be triaged')")
    p_rr.set_defaults(func=cmd_report_recent)

    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
