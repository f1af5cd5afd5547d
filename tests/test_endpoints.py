"""Path construction and default parameters for every endpoint wrapper."""
from datetime import date

import pytest

from congressgov_client import ACTIVE_CONGRESS, InvalidParameterError
from congressgov_client.endpoints import CongressEndpointsMixin

PAGE = {"limit": 20, "offset": 0}

PATH_CASES = [
    # congress
    ("get_congresses", (), {}, "congress", PAGE),
    ("get_congress", (117,), {}, "congress/117", {}),
    ("get_current_congress", (), {}, "congress/current", {}),
    # members
    ("get_member", ("L000174",), {}, "member/L000174", {}),
    ("get_members_by_state", ("NY",), {}, f"member/congress/{ACTIVE_CONGRESS}/NY", {"currentMember": True}),
    ("get_members_by_state", ("MI", 118), {"current_member": False}, "member/congress/118/MI",
     {"currentMember": False}),
    ("get_members_by_state_and_district", ("CA", 12, 118), {}, "member/congress/118/CA/12",
     {"currentMember": True}),
    ("get_member_sponsored_legislation", ("L000174",), {}, "member/L000174/sponsored-legislation", PAGE),
    ("get_member_cosponsored_legislation", ("L000174",), {"limit": 5}, "member/L000174/cosponsored-legislation",
     {"limit": 5, "offset": 0}),
    # bills
    ("get_bill_details", ("hr", 3076, 117), {}, "bill/117/hr/3076", {}),
    ("get_bill_details", ("s", 1), {}, f"bill/{ACTIVE_CONGRESS}/s/1", {}),
    ("get_subjects_for_bill", ("hr", 1, 118), {}, "bill/118/hr/1/subjects", {}),
    ("get_summaries_for_bill", ("hr", 1, 118), {}, "bill/118/hr/1/summaries", {}),
    ("get_titles_for_bill", ("hr", 1, 118), {}, "bill/118/hr/1/titles", {}),
    ("get_texts_for_bill", ("hr", 1, 118), {}, "bill/118/hr/1/text", {}),
    ("get_cosponsors_for_bill", ("hr", 1, 118), {}, "bill/118/hr/1/cosponsors", {}),
    ("get_actions_for_bill", ("hr", 1, 118), {}, "bill/118/hr/1/actions", {}),
    ("get_related_bills", ("hr", 1, 118), {}, "bill/118/hr/1/relatedbills", {}),
    ("get_committees_for_bill", ("hr", 1, 118), {}, "bill/118/hr/1/committees", {}),
    ("get_amendments_for_bill", ("hr", 1, 118), {}, "bill/118/hr/1/amendments", {}),
    # summaries
    ("get_summaries", (), {}, "summaries", PAGE),
    ("get_summaries", (118,), {}, "summaries/118", PAGE),
    ("get_summaries", (118, "hr"), {}, "summaries/118/hr", PAGE),
    ("get_summaries", (None, "hr"), {}, "summaries", PAGE),
    # amendments
    ("get_amendments", (), {}, "amendment", PAGE),
    ("get_amendments", (117,), {}, "amendment/117", PAGE),
    ("get_amendments", (117, "SAMDT"), {}, "amendment/117/SAMDT", PAGE),
    ("get_amendments_to_amendment", (117, "SAMDT", 2137), {}, "amendment/117/samdt/2137/amendments", {}),
    ("get_cosponsors_for_amendment", (117, "SUAMDT", 4), {}, "amendment/117/suamdt/4/cosponsors", {}),
    ("get_text_for_amendment", (117, "HAMDT", 5), {}, "amendment/117/hamdt/5/text", {}),
    ("get_actions_for_amendment", (117, "HAMDT", 5), {}, "amendment/117/hamdt/5/actions", {}),
    # laws
    ("get_laws", (), {}, f"law/{ACTIVE_CONGRESS}", {}),
    ("get_laws", (118,), {}, "law/118", {}),
    # congressional record
    ("get_bound_congressional_record", (1990,), {}, "bound-congressional-record/1990", {}),
    ("get_bound_congressional_record", (1990, 5), {}, "bound-congressional-record/1990/5", {}),
    ("get_daily_congressional_records", (), {}, "daily-congressional-record", {}),
    ("get_daily_congressional_records", ("166",), {}, "daily-congressional-record/166", {}),
    ("get_daily_congressional_record_issue", ("166", "153"), {}, "daily-congressional-record/166/153", {}),
    ("get_daily_congressional_record_articles", ("166", "153"), {},
     "daily-congressional-record/166/153/articles", {}),
    # CRS
    ("get_crs_report", ("R47175",), {}, "crsreport/R47175", {}),
    # committees
    ("get_committees", (), {}, "committee", PAGE),
    ("get_committees", (118,), {}, "committee/118", PAGE),
    ("get_committees", (118, "house"), {}, "committee/118/house", PAGE),
    ("get_committees", (None, "house"), {}, "committee", PAGE),
    ("get_committee", ("house", "hsag00"), {}, "committee/house/hsag00", {}),
    ("get_committee_nominations", ("ssju00",), {}, "committee/senate/ssju00/nominations", PAGE),
    ("get_committee_house_communications", ("hsas00",), {}, "committee/house/hsas00/house-communication", PAGE),
    ("get_committee_senate_communications", ("ssas00",), {}, "committee/senate/ssas00/senate-communication", PAGE),
    ("get_committee_meetings", (118, "house"), {}, "committee-meeting/118/house", PAGE),
    ("get_committee_meeting", (118, "house", 115538), {}, "committee-meeting/118/house/115538", {}),
    ("get_committee_prints", (117,), {}, "committee-print/117", PAGE),
    ("get_committee_print", (117, "house", 48144), {}, "committee-print/117/house/48144", {}),
    ("get_committee_print_text", (117, "house", 48144), {}, "committee-print/117/house/48144/text", {}),
    ("get_committee_reports", (116, "hrpt"), {}, "committee-report/116/hrpt", PAGE),
    ("get_committee_report", (116, "hrpt", 617), {}, "committee-report/116/hrpt/617", {}),
    ("get_committee_report", (116, "hrpt", 617, 2), {}, "committee-report/116/hrpt/617/2", {}),
    ("get_committee_report_text", (116, "hrpt", 617), {}, "committee-report/116/hrpt/617/text", {}),
    ("get_committee_report_text", (116, "hrpt", 617, 2), {}, "committee-report/116/hrpt/617/2/text", {}),
    # hearings
    ("get_hearings", (), {}, "hearing", PAGE),
    ("get_hearings", (118, "senate"), {}, "hearing/118/senate", PAGE),
    ("get_hearing", (116, "house", 41365), {}, "hearing/116/house/41365", {}),
    # communications
    ("get_house_communications", (117, "ec"), {}, "house-communication/117/ec", PAGE),
    ("get_house_communication", (117, "ec", 3324), {}, "house-communication/117/ec/3324", {}),
    ("get_senate_communications", (117,), {}, "senate-communication/117", PAGE),
    ("get_senate_communication", (117, "pom", 2561), {}, "senate-communication/117/pom/2561", {}),
    # house requirements
    ("get_house_requirements", (), {}, "house-requirement", PAGE),
    ("get_house_requirement", (8070,), {}, "house-requirement/8070", {}),
    ("get_house_requirement_matching_communications", (8070,), {},
     "house-requirement/8070/matching-communications", PAGE),
    # nominations
    ("get_nominations", (), {}, "nomination", PAGE),
    ("get_nominations", (117,), {"offset": 40}, "nomination/117", {"limit": 20, "offset": 40}),
    ("get_nomination", (117, "2467"), {}, "nomination/117/2467", {}),
    ("get_nominees", (117, "2467", 1), {}, "nomination/117/2467/1", {}),
    ("get_nomination_committees", (117, "2467"), {}, "nomination/117/2467/committees", {}),
    ("get_nomination_actions", (117, "2467"), {}, "nomination/117/2467/actions", {}),
    ("get_nomination_hearings", (116, "389"), {}, "nomination/116/389/hearings", {}),
    # treaties
    ("get_treaties", (), {}, "treaty", PAGE),
    ("get_treaties", (117,), {}, "treaty/117", PAGE),
    ("get_treaty", (117, 3), {}, "treaty/117/3", {}),
    ("get_treaty", (114, 13, "A"), {}, "treaty/114/13/A", {}),
    ("get_treaty_actions", (117, 3), {}, "treaty/117/3/actions", {}),
    ("get_treaty_actions", (114, 13, "A"), {}, "treaty/114/13/A/actions", {}),
    ("get_treaty_committees", (116, 6), {}, "treaty/116/6/committees", {}),
    # house roll-call votes
    ("get_house_roll_call_votes", (), {}, "house-vote/", PAGE),
    ("get_house_roll_call_votes", (119,), {}, "house-vote/119/", PAGE),
    ("get_house_roll_call_votes", (119, 1), {}, "house-vote/119/1/", PAGE),
    ("get_house_roll_call_vote", (119, 1, 17), {}, "house-vote/119/1/17", {}),
    ("get_house_roll_call_vote_member_votes", (119, 1, 17), {}, "house-vote/119/1/17/members", {}),
]


@pytest.mark.parametrize("method, args, kwargs, path, params", PATH_CASES)
def test_endpoint_path_and_params(recorder, method, args, kwargs, path, params):
    out = getattr(recorder, method)(*args, **kwargs)
    assert recorder.last_path == path
    assert recorder.last_params == params
    assert out == {"path": path}
    assert len(recorder.calls) == 1


def test_get_members_defaults(recorder):
    recorder.get_members()
    assert recorder.last_path == "member"
    assert recorder.last_raw_params == {
        "limit": 20,
        "offset": 0,
        "currentMember": True,
        "fromDateTime": None,
        "toDateTime": None,
    }


def test_get_members_by_congress_repeats_congress_in_query(recorder):
    recorder.get_members_by_congress()
    assert recorder.last_path == f"member/congress/{ACTIVE_CONGRESS}"
    assert recorder.last_params["congress"] == ACTIVE_CONGRESS
    assert recorder.last_params["currentMember"] is True


def test_get_bills_defaults(recorder):
    recorder.get_bills()
    assert recorder.last_path == "bill"
    assert recorder.last_params["sort"] == "updateDate+desc"
    assert "congress" not in recorder.last_params


def test_get_bills_date_filters_passed_through(recorder):
    since = date(2024, 6, 1)
    recorder.get_bills(118, updated_after=since, sort="updateDate+asc")
    assert recorder.last_path == "bill/118"
    assert recorder.last_params["fromDateTime"] is since
    assert recorder.last_raw_params["toDateTime"] is None
    assert recorder.last_params["sort"] == "updateDate+asc"


def test_crs_reports_updated_after(recorder):
    recorder.get_crs_reports(updated_after=date(2023, 1, 1))
    assert recorder.last_path == "crsreport"
    assert recorder.last_params["fromDateTime"] == date(2023, 1, 1)


def test_amendment_details_lowercases_type(recorder):
    recorder.get_amendment_details(congress=117, amendment_type="HAMDT", amendment_number="5")
    assert recorder.last_path == "amendment/117/hamdt/5"


def test_bound_record_day_without_month(recorder):
    with pytest.raises(InvalidParameterError):
        recorder.get_bound_congressional_record(year=2020, day=15)
    assert recorder.calls == []


def test_bound_record_full_date(recorder):
    recorder.get_bound_congressional_record(year=2020, month=3, day=15)
    assert recorder.last_path == "bound-congressional-record/2020/3/15"


def test_report_part_zero_is_omitted(recorder):
    recorder.get_committee_report(116, "hrpt", 617, part=0)
    assert recorder.last_path == "committee-report/116/hrpt/617"


def test_identifiers_are_not_escaped(recorder):
    recorder.get_crs_report("94-166 rev")
    assert recorder.last_path == "crsreport/94-166 rev"


@pytest.mark.parametrize("method, args, path", [
    ("get_treaty", (117, 0), "treaty/117/0"),
    ("get_treaty_actions", (117, 0), "treaty/117/0/actions"),
    ("get_treaty_committees", (117, 0), "treaty/117/0/committees"),
    ("get_committee_report", (116, "hrpt", ""), "committee-report/116/hrpt/"),
    ("get_committee_report_text", (116, "hrpt", 0), "committee-report/116/hrpt/0/text"),
])
def test_required_identifiers_kept_when_falsy(recorder, method, args, path):
    getattr(recorder, method)(*args)
    assert recorder.last_path == path


def test_mixin_requires_request_hook():
    with pytest.raises(TypeError):
        CongressEndpointsMixin()
