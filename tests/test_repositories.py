"""Tests for the data-access layer against an in-memory database."""

import unittest
from datetime import UTC, datetime, timedelta

from sqlalchemy import func

from parksys.core.errors import ConflictError, NotFoundError, ValidationFailedError
from parksys.models import Advertisement, Amenity, ParkAmenity, Volunteer
from parksys.repositories import (
    ActivityRepository,
    AdvertisementRepository,
    AmenityRepository,
    AssetRepository,
    ParkRepository,
    VolunteerRepository,
)
from tests.support import aware, make_database, seed_park, seed_user, seed_volunteer


class RepositoryTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.database = make_database()
        self.session = self.database.session()

    def tearDown(self) -> None:
        self.session.close()
        self.database.dispose()

    def reread(self, model, id_):
        """Load a row through a fresh session, bypassing the identity map."""
        other = self.database.session()
        try:
            return other.get(model, id_)
        finally:
            other.close()


class TestUpdateFields(RepositoryTestCase):
    """update_fields changes exactly one row, or nothing at all."""

    def test_valid_id_updates_named_columns_and_timestamp(self) -> None:
        volunteer = seed_volunteer(self.session, phone="33-1111-2222")
        before = volunteer.updated_at

        updated = VolunteerRepository(self.session).update_fields(
            volunteer.id, availability="weekends", phone="33-9999-0000"
        )

        self.assertEqual(updated.availability, "weekends")
        self.assertEqual(updated.phone, "33-9999-0000")
        stored = self.reread(Volunteer, volunteer.id)
        self.assertEqual(stored.availability, "weekends")
        self.assertEqual(stored.phone, "33-9999-0000")
        self.assertEqual(stored.full_name, "María López")
        self.assertGreaterEqual(aware(stored.updated_at), aware(before))

    def test_only_target_row_changes(self) -> None:
        first = seed_volunteer(self.session, full_name="Uno")
        second = seed_volunteer(self.session, full_name="Dos", skills="Pintura")

        VolunteerRepository(self.session).update_fields(first.id, skills="Carpintería")

        self.assertEqual(self.reread(Volunteer, first.id).skills, "Carpintería")
        self.assertEqual(self.reread(Volunteer, second.id).skills, "Pintura")

    def test_nonexistent_id_raises_not_found_and_mutates_nothing(self) -> None:
        seed_volunteer(self.session, skills="Jardinería")
        with self.assertRaises(NotFoundError) as ctx:
            VolunteerRepository(self.session).update_fields(999, skills="Plomería")
        self.assertEqual(ctx.exception.status_code, 404)
        count = (
            self.session.query(func.count(Volunteer.id))
            .filter(Volunteer.skills == "Plomería")
            .scalar()
        )
        self.assertEqual(count, 0)

    def test_unknown_column_is_rejected(self) -> None:
        volunteer = seed_volunteer(self.session)
        with self.assertRaises(ValidationFailedError):
            VolunteerRepository(self.session).update_fields(volunteer.id, favourite_colour="green")

    def test_primary_key_cannot_be_changed(self) -> None:
        volunteer = seed_volunteer(self.session)
        with self.assertRaises(ValidationFailedError):
            VolunteerRepository(self.session).update_fields(volunteer.id, id=500)
        self.assertIsNotNone(self.reread(Volunteer, volunteer.id))

    def test_empty_update_is_rejected(self) -> None:
        volunteer = seed_volunteer(self.session)
        with self.assertRaises(ValidationFailedError):
            VolunteerRepository(self.session).update_fields(volunteer.id)

    def test_null_for_not_null_column_is_rejected(self) -> None:
        volunteer = seed_volunteer(self.session)
        with self.assertRaises(ValidationFailedError):
            VolunteerRepository(self.session).update_fields(volunteer.id, full_name=None, skills="Pintura")
        stored = self.reread(Volunteer, volunteer.id)
        self.assertEqual((stored.full_name, stored.skills), ("María López", "Jardinería"))

    def test_null_for_nullable_column_is_allowed(self) -> None:
        volunteer = seed_volunteer(self.session, phone="33 1234 5678")
        VolunteerRepository(self.session).update_fields(volunteer.id, phone=None)
        self.assertIsNone(self.reread(Volunteer, volunteer.id).phone)

    def test_values_are_bound_not_interpolated(self) -> None:
        volunteer = seed_volunteer(self.session)
        hostile = "x'; UPDATE volunteers SET skills = 'pwned'; --"
        VolunteerRepository(self.session).update_skills(volunteer.id, hostile)
        self.assertEqual(self.reread(Volunteer, volunteer.id).skills, hostile)


class TestVolunteerSkills(RepositoryTestCase):
    def test_update_skills_of_volunteer_11(self) -> None:
        seed_volunteer(self.session, id=11, full_name="Voluntario Once", skills="Limpieza")

        VolunteerRepository(self.session).update_skills(11, "Jardinería, plomería, carpintería")

        self.assertEqual(
            self.reread(Volunteer, 11).skills, "Jardinería, plomería, carpintería"
        )

    def test_same_update_twice_is_idempotent(self) -> None:
        volunteer = seed_volunteer(self.session)
        repo = VolunteerRepository(self.session)
        repo.update_skills(volunteer.id, "Primeros auxilios")
        repo.update_skills(volunteer.id, "Primeros auxilios")

        self.assertEqual(self.reread(Volunteer, volunteer.id).skills, "Primeros auxilios")
        self.assertEqual(self.session.query(func.count(Volunteer.id)).scalar(), 1)

    def test_skills_are_trimmed(self) -> None:
        volunteer = seed_volunteer(self.session)
        updated = VolunteerRepository(self.session).update_skills(volunteer.id, "  Electricidad  ")
        self.assertEqual(updated.skills, "Electricidad")


class TestVolunteerStatus(RepositoryTestCase):
    def test_soft_delete_marks_inactive_and_hides_from_active_list(self) -> None:
        keep = seed_volunteer(self.session, full_name="Activo")
        gone = seed_volunteer(self.session, full_name="Inactivo")
        repo = VolunteerRepository(self.session)

        repo.soft_delete(gone.id)

        self.assertEqual(self.reread(Volunteer, gone.id).status, "inactive")
        self.assertEqual([v.id for v in repo.list_active()], [keep.id])

    def test_invalid_status_rejected(self) -> None:
        volunteer = seed_volunteer(self.session)
        with self.assertRaises(ValidationFailedError):
            VolunteerRepository(self.session).set_status(volunteer.id, "retired")

    def test_lookup_by_user_account(self) -> None:
        user = seed_user(self.session, "jorge", "secreto1", role="volunteer")
        volunteer = seed_volunteer(self.session, user_id=user.id)
        repo = VolunteerRepository(self.session)
        self.assertEqual(repo.get_by_user_id(user.id).id, volunteer.id)
        self.assertIsNone(repo.get_by_user_id(user.id + 1))

    def test_interest_areas_stored_as_json_list(self) -> None:
        volunteer = seed_volunteer(self.session)
        VolunteerRepository(self.session).update_profile(
            volunteer.id, interest_areas=["nature", "events"]
        )
        self.assertEqual(self.reread(Volunteer, volunteer.id).interest_areas, ["nature", "events"])


class TestParks(RepositoryTestCase):
    def test_search_filters_and_excludes_deleted(self) -> None:
        seed_park(self.session, "Parque Agua Azul", park_type="urbano", postal_code="44100")
        seed_park(self.session, "Bosque Colomos", park_type="bosque", description="Bosque urbano")
        deleted = seed_park(self.session, "Parque Cerrado")
        repo = ParkRepository(self.session)
        repo.soft_delete(deleted.id)

        self.assertEqual(
            [p.name for p in repo.search()], ["Bosque Colomos", "Parque Agua Azul"]
        )
        self.assertEqual([p.name for p in repo.search(park_type="urbano")], ["Parque Agua Azul"])
        self.assertEqual([p.name for p in repo.search(search="urbano")], ["Bosque Colomos"])
        self.assertEqual([p.name for p in repo.search(postal_code="44100")], ["Parque Agua Azul"])

    def test_deleted_park_is_not_found(self) -> None:
        park = seed_park(self.session)
        repo = ParkRepository(self.session)
        repo.soft_delete(park.id)
        with self.assertRaises(NotFoundError):
            repo.get_or_404(park.id)

    def test_add_and_remove_amenity(self) -> None:
        park = seed_park(self.session)
        amenity = AmenityRepository(self.session).create(name="Juegos infantiles", icon="playground")
        repo = ParkRepository(self.session)

        row = repo.add_amenity(park.id, amenity.id, module_name="Zona norte")
        self.assertEqual([(pa.id, a.name) for pa, a in repo.amenities(park.id)], [(row.id, "Juegos infantiles")])

        repo.remove_amenity(park.id, row.id)
        self.assertEqual(repo.amenities(park.id), [])
        with self.assertRaises(NotFoundError):
            repo.remove_amenity(park.id, row.id)

    def test_add_unknown_amenity(self) -> None:
        park = seed_park(self.session)
        with self.assertRaises(NotFoundError):
            ParkRepository(self.session).add_amenity(park.id, 404)


class TestAmenities(RepositoryTestCase):
    def test_duplicate_name_conflicts(self) -> None:
        repo = AmenityRepository(self.session)
        repo.create(name="Baños")
        with self.assertRaises(ConflictError):
            repo.create(name="Baños")

    def test_delete_in_use_is_refused(self) -> None:
        park = seed_park(self.session)
        repo = AmenityRepository(self.session)
        amenity = repo.create(name="Fuente")
        self.session.add(ParkAmenity(park_id=park.id, amenity_id=amenity.id))
        self.session.commit()

        with self.assertRaises(ValidationFailedError):
            repo.delete(amenity.id)
        self.assertIsNotNone(self.reread(Amenity, amenity.id))

    def test_delete_unused(self) -> None:
        repo = AmenityRepository(self.session)
        amenity = repo.create(name="Bancas")
        repo.delete(amenity.id)
        self.assertIsNone(self.reread(Amenity, amenity.id))

    def test_dashboard_counts(self) -> None:
        p1 = seed_park(self.session, "Uno")
        p2 = seed_park(self.session, "Dos")
        repo = AmenityRepository(self.session)
        fountain = repo.create(name="Fuente")
        repo.create(name="Pista")
        self.session.add_all(
            [
                ParkAmenity(park_id=p1.id, amenity_id=fountain.id),
                ParkAmenity(park_id=p2.id, amenity_id=fountain.id),
            ]
        )
        self.session.commit()

        data = repo.dashboard()

        self.assertEqual(data["total_amenities"], 2)
        self.assertEqual(data["total_parks"], 2)
        self.assertEqual(data["parks_with_amenities"], 2)
        self.assertEqual(data["total_assignments"], 2)
        self.assertEqual(data["average_amenities_per_park"], 1.0)
        top = data["most_popular"][0]
        self.assertEqual((top["name"], top["parks_count"], top["utilization_rate"]), ("Fuente", 2, 100))

    def test_dashboard_ignores_deleted_parks(self) -> None:
        live = seed_park(self.session, "Vivo")
        gone = seed_park(self.session, "Cerrado", is_deleted=True)
        repo = AmenityRepository(self.session)
        fountain = repo.create(name="Fuente")
        self.session.add_all(
            [
                ParkAmenity(park_id=live.id, amenity_id=fountain.id),
                ParkAmenity(park_id=gone.id, amenity_id=fountain.id),
            ]
        )
        self.session.commit()

        data = repo.dashboard()

        self.assertEqual(data["total_parks"], 1)
        self.assertEqual(data["parks_with_amenities"], 1)
        self.assertEqual(data["total_assignments"], 1)
        fountain_stats = data["amenities"][0]
        self.assertEqual(fountain_stats["parks_count"], 1)
        self.assertEqual(fountain_stats["utilization_rate"], 100)
        self.assertEqual(data["amenities"][1]["utilization_rate"], 0)


class TestActivitiesAndAssets(RepositoryTestCase):
    def test_activity_requires_existing_park(self) -> None:
        with self.assertRaises(NotFoundError):
            ActivityRepository(self.session).create_activity(
                park_id=123, title="Yoga", start_date=datetime(2025, 7, 1, 8, tzinfo=UTC)
            )

    def test_activity_end_before_start_rejected(self) -> None:
        park = seed_park(self.session)
        start = datetime(2025, 7, 1, 8, tzinfo=UTC)
        with self.assertRaises(ValidationFailedError):
            ActivityRepository(self.session).create_activity(
                park_id=park.id, title="Yoga", start_date=start, end_date=start - timedelta(hours=1)
            )

    def test_asset_rejects_unknown_category(self) -> None:
        park = seed_park(self.session)
        with self.assertRaises(NotFoundError):
            AssetRepository(self.session).create_asset(name="Podadora", category_id=9, park_id=park.id)

    def test_unknown_status_filter_rejected(self) -> None:
        with self.assertRaises(ValidationFailedError):
            AssetRepository(self.session).search(status="stolen")
        with self.assertRaises(ValidationFailedError):
            AdvertisementRepository(self.session).search(status="archived")


class TestAdvertisements(RepositoryTestCase):
    def test_list_active_respects_status_and_window(self) -> None:
        now = datetime(2025, 8, 1, 12, tzinfo=UTC)
        self.session.add_all(
            [
                Advertisement(title="open", status="active"),
                Advertisement(
                    title="running",
                    status="active",
                    start_date=now - timedelta(days=1),
                    end_date=now + timedelta(days=1),
                ),
                Advertisement(title="future", status="active", start_date=now + timedelta(days=2)),
                Advertisement(title="ended", status="active", end_date=now - timedelta(days=2)),
                Advertisement(title="draft", status="draft"),
            ]
        )
        self.session.commit()

        titles = [ad.title for ad in AdvertisementRepository(self.session).list_active(now)]

        self.assertEqual(titles, ["open", "running"])


if __name__ == "__main__":
    unittest.main()
