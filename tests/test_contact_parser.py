import itertools

from resume_intake.models.resume_models import ContactInfo
from resume_intake.services.contact_parser import parse_contact

CONTACT_LINES = [
    "Location: Seattle, WA",
    "Phone: 555-0100",
    "Email: jane@example.com",
    "LinkedIn: linkedin.com/in/janedoe",
]

EXPECTED = ContactInfo(
    location="Seattle, WA",
    phone="555-0100",
    email="jane@example.com",
    profile_link="linkedin.com/in/janedoe",
)


def test_parses_all_fields():
    assert parse_contact("\n".join(CONTACT_LINES)) == EXPECTED


def test_line_order_does_not_matter():
    for order in itertools.permutations(CONTACT_LINES):
        assert parse_contact("\n".join(order)) == EXPECTED


def test_missing_fields_stay_none():
    contact = parse_contact("Email: jane@example.com\nsomething else")

    assert contact.email == "jane@example.com"
    assert contact.location is None
    assert contact.phone is None
    assert contact.profile_link is None


def test_values_are_not_validated():
    contact = parse_contact("Phone: call me maybe\nEmail: not-an-email")

    assert contact.phone == "call me maybe"
    assert contact.email == "not-an-email"


def test_label_with_empty_value_is_empty_string():
    contact = parse_contact("Phone:   \nEmail: a@b.co")

    assert contact.phone == ""
    assert contact.email == "a@b.co"


def test_fields_on_one_line_are_independent():
    contact = parse_contact("Location: Boston Phone: 555")

    assert contact.location == "Boston Phone: 555"
    assert contact.phone == "555"


def test_empty_segment():
    assert parse_contact("") == ContactInfo()


def test_unicode_line_breaks_end_a_field():
    contact = parse_contact("Location: Seattle\x85Phone: 555\u2028Email: a@b.co\x0cLinkedIn: in/jane")

    assert contact == ContactInfo(
        location="Seattle",
        phone="555",
        email="a@b.co",
        profile_link="in/jane",
    )
