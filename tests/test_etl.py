import json
import pytest
from etl.catalog import CAMPUSES, aggregate, load_catalogs, load_source, tag_courses


MANOA = next(c for c in CAMPUSES if c.key == "manoa")
HILO  = next(c for c in CAMPUSES if c.key == "hilo")


@pytest.fixture
def sample_manoa_data():
    """Sample Mānoa catalog data."""
    return [
        {
            "course_id": "ICS-111",
            "course_prefix": "ICS",
            "course_number": "111",
            "course_title": "Introduction to Computer Science I",
            "dept_name": "Information and Computer Sciences",
            "num_units": "4",
            "metadata": "",
        },
        {
            "course_prefix": "ICS",
            "course_number": "321",
            "course_title": "Data Storage and Management",
        },
    ]


@pytest.fixture
def sample_hilo_data():
    """Sample Hilo catalog data."""
    return [
        {
            "course_prefix": "CS",
            "course_number": "150",
            "course_title": "Introduction to Computer Science",
            "dept_name": "Computer Science",
        }
    ]


class TestCampusRegistry:
    """Test the fixed campus list."""

    def test_ten_campuses(self):
        """Test that all ten institutions are registered."""
        assert len(CAMPUSES) == 10
        assert len({c.key for c in CAMPUSES}) == 10

    def test_names_are_non_empty(self):
        """Test that every campus has a display name."""
        for campus in CAMPUSES:
            assert campus.name.strip()

    def test_registry_order(self):
        """Test that order is the configured order, not alphabetical."""
        keys = [c.key for c in CAMPUSES]
        assert keys[0] == "hawaiicc"
        assert keys[-1] == "west_oahu"
        assert MANOA.name == "University of Hawai‘i at Mānoa"


class TestTagCourses:
    """Test coercion of raw sources into tagged courses."""

    def test_tags_campus(self, sample_manoa_data):
        """Test that every course gets the campus display name and nothing else."""
        courses = tag_courses(sample_manoa_data, MANOA)
        assert len(courses) == 2
        for course in courses:
            assert course["campus"] == MANOA.name
            assert "campus_key" not in course

    def test_keeps_original_fields(self, sample_manoa_data):
        """Test that source fields are carried over untouched."""
        course = tag_courses(sample_manoa_data, MANOA)[0]
        assert course["course_id"] == "ICS-111"
        assert course["num_units"] == "4"

    def test_does_not_mutate_source(self, sample_manoa_data):
        """Test that raw records are copied, not stamped in place."""
        tag_courses(sample_manoa_data, MANOA)
        assert "campus" not in sample_manoa_data[0]

    @pytest.mark.parametrize("data", [None, {}, {"courses": []}, "oops", 42])
    def test_non_list_source_is_empty(self, data):
        """Test that non-list sources yield no courses and do not raise."""
        assert tag_courses(data, MANOA) == []

    def test_non_object_elements_dropped(self):
        """Test that scalar entries inside a list are skipped."""
        courses = tag_courses(["ICS 111", 7, None, {"course_title": "Ok"}], MANOA)
        assert courses == [{"course_title": "Ok", "campus": MANOA.name}]


class TestAggregate:
    """Test concatenation across campuses."""

    def test_order_follows_sources(self, sample_manoa_data, sample_hilo_data):
        """Test that output is source order, then per-source order."""
        courses = aggregate([(HILO, sample_hilo_data), (MANOA, sample_manoa_data)])
        assert [c["course_number"] for c in courses] == ["150", "111", "321"]
        assert courses[0]["campus"] == HILO.name

    def test_malformed_source_contributes_nothing(self, sample_hilo_data):
        """Test that one bad catalog does not affect the others."""
        courses = aggregate([(MANOA, {"not": "a list"}), (HILO, sample_hilo_data)])
        assert len(courses) == 1
        assert courses[0]["campus"] == HILO.name


class TestLoading:
    """Test reading catalog files from disk."""

    def test_missing_file(self, tmp_path):
        """Test that a missing file loads as None."""
        assert load_source(tmp_path / "nope.json") is None

    def test_invalid_json(self, tmp_path):
        """Test that unparsable JSON loads as None."""
        path = tmp_path / "bad.json"
        path.write_text("[{", encoding="utf-8")
        assert load_source(path) is None

    def test_load_catalogs(self, tmp_path, sample_manoa_data):
        """Test that every campus is returned, present or not."""
        (tmp_path / MANOA.filename).write_text(
            json.dumps(sample_manoa_data, ensure_ascii=False), encoding="utf-8"
        )
        (tmp_path / HILO.filename).write_text("{}", encoding="utf-8")

        sources = load_catalogs(tmp_path)
        assert [c for c, _ in sources] == list(CAMPUSES)

        courses = aggregate(sources)
        assert len(courses) == 2
        assert all(c["campus"] == MANOA.name for c in courses)

    def test_bundled_catalogs_load(self):
        """Test that the shipped data directory aggregates cleanly."""
        courses = aggregate(load_catalogs())
        assert courses
        assert all(c["campus"] for c in courses)
