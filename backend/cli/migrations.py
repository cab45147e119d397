"""CLI for database migrations and maintenance."""
import argparse
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def cmd_migrate(args):
    """Run alembic upgrade head."""
    return subprocess.call([sys.executable, "-m", "alembic", "upgrade", "head"], cwd=str(ROOT))


def cmd_stamp(args):
    """Stamp alembic revision (pass-through to alembic stamp)."""
    rev = args.revision or "head"
    return subprocess.call([sys.executable, "-m", "alembic", "stamp", rev], cwd=str(ROOT))


def cmd_check(args):
    """Report which registry tables exist in the configured database."""
    from sqlalchemy import inspect

    from app.core.database import get_engine

    existing = set(inspect(get_engine()).get_table_names())
    missing = [name for name in ("professionals", "contacts") if name not in existing]
    for name in ("professionals", "contacts"):
        print(f"{name}: {'ok' if name in existing else 'MISSING'}")
    return 1 if missing else 0


def cmd_reconcile(args):
    """Repair a professional whose deletion cascade is out of step with its contacts."""
    from app.components.validation import ProfessionalValidator
    from app.core.database import get_session_local
    from app.core.exceptions import ResourceNotFoundError
    from app.repositories.sqlalchemy_repository import (
        SqlAlchemyContactRepository, SqlAlchemyProfessionalRepository)
    from app.services.professional_service import ProfessionalService
    from app.utils.datetime_utils import SystemClock

    db = get_session_local()()
    try:
        service = ProfessionalService(
            professionals=SqlAlchemyProfessionalRepository(db),
            contacts=SqlAlchemyContactRepository(db),
            validator=ProfessionalValidator(),
            clock=SystemClock(),
        )
        try:
            report = service.reconcile_contacts(args.professional_id)
        except ResourceNotFoundError as e:
            print(e.message)
            return 1
        state = "deleted" if report.professional_marked else "active"
        print(
            f"professional {report.professional_id} ({state}): "
            f"{report.matched_contacts} contacts matched, {report.updated_contacts} updated"
        )
        return 0
    finally:
        db.close()


def build_parser():
    p = argparse.ArgumentParser(prog="migrations")
    sub = p.add_subparsers(dest="cmd")
    s = sub.add_parser("migrate", help="Run migrations (upgrade head)")
    s.set_defaults(func=cmd_migrate)
    s = sub.add_parser("stamp", help="Stamp alembic to a revision")
    s.add_argument("--revision", "-r", help="Revision to stamp", default="head")
    s.set_defaults(func=cmd_stamp)
    s = sub.add_parser("check", help="Check that registry tables exist")
    s.set_defaults(func=cmd_check)
    s = sub.add_parser("reconcile", help="Finish an interrupted deletion or re-flag contacts of a deleted professional")
    s.add_argument("professional_id", type=int)
    s.set_defaults(func=cmd_reconcile)
    return p


def main(argv=None):
    p = build_parser()
    args = p.parse_args(argv)
    if not hasattr(args, "func"):
        p.print_help()
        return 2
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
