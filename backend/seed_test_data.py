"""
Seed database with commission users and sample disputes, parties and hearings.
Performs a full clean (DROP ALL) before seeding.
"""
import asyncio
import sys
import os

# Ensure backend directory is in path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from datetime import timedelta
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker

from ic_court.db.base import Base, utcnow
from ic_court.db.session import enable_sqlite_foreign_keys
from ic_court.core.config import settings
from ic_court.core.security import ActorContext
from ic_court.models.enums import DisputeStatus, DisputeType, PartyRole, PartyType, UserRole
from ic_court.schemas import DisputeCreate, HearingCreate, PartyCreate, UserCreate
from ic_court.services import DisputeService, HearingService, PartyService, UserService

import ic_court.models  # noqa: F401


async def seed_database():
    engine = create_async_engine(settings.SQLALCHEMY_DATABASE_URI, echo=settings.SQL_ECHO)
    enable_sqlite_foreign_keys(engine)
    async_session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    print("[*] Resetting database...")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    print("[*] Tables recreated.")

    # The placeholder actor is the first user created, so it must be staff
    staff = ActorContext(actor_id=settings.DEFAULT_ACTOR_ID, role=UserRole.STAFF)

    async with async_session() as session:
        print("[*] Seeding database with test data...")

        users = UserService(session)
        accounts = [
            UserCreate(username="admin", email="admin@komisiinformasi.jakarta.go.id",
                       full_name="Administrator Komisi Informasi", role=UserRole.STAFF,
                       phone="+62-21-12345678", password="admin123"),
            UserCreate(username="komisioner1", email="komisioner1@komisiinformasi.jakarta.go.id",
                       full_name="Komisioner Satu", role=UserRole.COMMISSIONER, password="password123"),
            UserCreate(username="panitera1", email="panitera1@komisiinformasi.jakarta.go.id",
                       full_name="Panitera Satu", role=UserRole.REGISTRAR, password="password123"),
            UserCreate(username="pemohon1", email="pemohon1@mail.co.id",
                       full_name="Budi Santoso", role=UserRole.APPLICANT, password="password123"),
            UserCreate(username="badanpublik1", email="ppid@dinas.jakarta.go.id",
                       full_name="PPID Dinas Pendidikan", role=UserRole.PUBLIC_BODY, password="password123"),
        ]
        for account in accounts:
            await users.create_user(account, staff)
        print(f"[OK] Created {len(accounts)} users")

        now = utcnow()
        disputes = DisputeService(session)
        first = await disputes.create_dispute(DisputeCreate(
            dispute_number="001/REG-PSI/I/2024",
            dispute_type=DisputeType.INFORMATION_DISPUTE,
            registration_date=now - timedelta(days=40),
            description="Permohonan informasi anggaran sekolah tidak ditanggapi",
        ), staff)
        second = await disputes.create_dispute(DisputeCreate(
            dispute_number="002/REG-PSI/II/2024",
            dispute_type=DisputeType.OBJECTION,
            registration_date=now - timedelta(days=20),
            description="Keberatan atas penolakan informasi pengadaan",
            status=DisputeStatus.IN_PROGRESS,
        ), staff)
        print("[OK] Created 2 disputes")

        parties = PartyService(session)
        for dispute in (first, second):
            await parties.create_party(PartyCreate(
                name="Budi Santoso", party_type=PartyType.INDIVIDUAL,
                email="pemohon1@mail.co.id", role=PartyRole.APPLICANT, dispute_id=dispute.id,
            ), staff)
            await parties.create_party(PartyCreate(
                name="Dinas Pendidikan Provinsi DKI Jakarta", party_type=PartyType.LEGAL_ENTITY,
                address="Jl. Gatot Subroto Kav. 40-41, Jakarta", role=PartyRole.RESPONDENT,
                dispute_id=dispute.id,
            ), staff)
        print("[OK] Created 4 parties")

        hearings = HearingService(session)
        await hearings.create_hearing(HearingCreate(
            dispute_id=second.id,
            hearing_date=now - timedelta(days=5),
            agenda="Pemeriksaan awal",
            result="Para pihak hadir, mediasi disarankan",
            attendees=["Komisioner Satu", "Budi Santoso", "PPID Dinas Pendidikan"],
        ), staff)
        await hearings.create_hearing(HearingCreate(
            dispute_id=second.id,
            hearing_date=now + timedelta(days=7),
            agenda="Mediasi",
        ), staff)
        print("[OK] Created 2 hearings")

        print("\n" + "="*60)
        print("TEST CREDENTIALS")
        print("="*60)
        print("  - admin / admin123 (staf_komisi, placeholder actor)")
        print("  - komisioner1, panitera1, pemohon1, badanpublik1 / password123")

        print("\n[SUCCESS] Database cleaned and seeded successfully!")

    await engine.dispose()

if __name__ == "__main__":
    if os.name == 'nt':
        asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())
    asyncio.run(seed_database())
