from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Any, Dict, Literal, Optional, Union

from .consts import (ACTIVE_CONGRESS, DEFAULT_BILL_SORT, DEFAULT_LIMIT,
                     DEFAULT_OFFSET)
from .errors import InvalidParameterError
from .models import (ActionsResponse, AmendmentResponse, AmendmentsResponse,
                     BillCommitteesResponse, BillResponse, BillsResponse,
                     BillTextResponse, BoundCongressionalRecordResponse,
                     CommitteeMeetingResponse, CommitteeMeetingsResponse,
                     CommitteeNominationsResponse, CommitteePrintResponse,
                     CommitteePrintsResponse, CommitteePrintTextResponse,
                     CommitteeReportResponse, CommitteeReportsResponse,
                     CommitteeReportTextResponse, CommitteeResponse,
                     CommitteesResponse, CongressesResponse, CongressResponse,
                     CosponsoredLegislationResponse, CosponsorsResponse,
                     CRSReportResponse, CRSReportsResponse,
                     DailyCongressionalRecordArticlesResponse,
                     DailyCongressionalRecordIssueResponse,
                     DailyCongressionalRecordListResponse, HearingResponse,
                     HearingsResponse, HouseCommunicationResponse,
                     HouseCommunicationsResponse,
                     HouseRequirementMatchingCommunicationsResponse,
                     HouseRequirementResponse, HouseRequirementsResponse,
                     HouseRollCallResponse,
                     HouseRollCallVoteMemberVotesResponse,
                     HouseRollCallVotesResponse, LawsResponse, MemberResponse,
                     MembersResponse, NominationActionsResponse,
                     NominationCommitteesResponse, NominationHearingsResponse,
                     NominationResponse, NominationsResponse, NomineesResponse,
                     RelatedBillsResponse, SenateCommunicationResponse,
                     SenateCommunicationsResponse, SponsoredLegislationResponse,
                     SubjectsResponse, SummariesListResponse,
                     SummariesResponse, TitlesResponse, TreatiesResponse,
                     TreatyActionsResponse, TreatyCommitteesResponse,
                     TreatyResponse)
from .utils import join_path

Chamber = Literal["house", "senate"]
AmendmentType = Literal["SAMDT", "HAMDT", "SUAMDT"]
BillSort = Literal["updateDate+desc", "updateDate+asc"]
ReportType = Literal["hrpt", "srpt", "erpt"]
HouseCommunicationType = Literal["ec", "pm", "pt", "ml"]
SenateCommunicationType = Literal["ec", "pom", "pm"]
DateLike = Union[date, datetime]
Identifier = Union[int, str]


def _treaty_path(congress: int, treaty_number: Identifier, treaty_suffix: Optional[str]) -> str:
    # suffix only for partitioned treaties
    path = f"treaty/{congress}/{treaty_number}"
    if treaty_suffix:
        path += f"/{treaty_suffix}"
    return path


class CongressEndpointsMixin(ABC):
    """
    Every Congress.gov v3 endpoint, as one thin method each.

    A method only fills in defaults, builds the resource path and hands
    ``(path, params)`` to ``self._request``. The concrete client decides how the
    request is sent: ``CongressAPIClient`` returns the parsed document,
    ``AsyncCongressAPIClient`` returns an awaitable of it. Methods are plain
    functions on purpose, so argument errors surface at call time on both.
    """

    @abstractmethod
    def _request(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Send one GET for ``path`` with ``params``; the result is what every wrapper returns."""

    # ------------- congress -------------
    def get_congresses(
        self, *, limit: int = DEFAULT_LIMIT, offset: int = DEFAULT_OFFSET
    ) -> CongressesResponse:
        """List all past and present congresses and their sessions."""
        return self._request("congress", {"limit": limit, "offset": offset})

    def get_congress(self, congress: Identifier) -> CongressResponse:
        return self._request(f"congress/{congress}")

    def get_current_congress(self) -> CongressResponse:
        return self._request("congress/current")

    # ------------- nominations -------------
    def get_nominations(
        self,
        congress: Optional[int] = None,
        *,
        limit: int = DEFAULT_LIMIT,
        offset: int = DEFAULT_OFFSET,
    ) -> NominationsResponse:
        """List nominations, across all congresses unless ``congress`` is given."""
        path = join_path("nomination", congress)
        return self._request(path, {"limit": limit, "offset": offset})

    def get_nomination(self, congress: int, nomination_number: Identifier) -> NominationResponse:
        return self._request(f"nomination/{congress}/{nomination_number}")

    def get_nominees(
        self, congress: int, nomination_number: Identifier, ordinal: Identifier
    ) -> NomineesResponse:
        """
        Nominees for one position of a nomination.

        Nominations covering several positions are split into parts, each
        identified by its ordinal.
        """
        return self._request(f"nomination/{congress}/{nomination_number}/{ordinal}")

    def get_nomination_committees(
        self, congress: int, nomination_number: Identifier
    ) -> NominationCommitteesResponse:
        return self._request(f"nomination/{congress}/{nomination_number}/committees")

    def get_nomination_actions(
        self, congress: int, nomination_number: Identifier
    ) -> NominationActionsResponse:
        return self._request(f"nomination/{congress}/{nomination_number}/actions")

    def get_nomination_hearings(
        self, congress: int, nomination_number: Identifier
    ) -> NominationHearingsResponse:
        return self._request(f"nomination/{congress}/{nomination_number}/hearings")

    # ------------- members -------------
    def get_members(
        self,
        *,
        limit: int = DEFAULT_LIMIT,
        offset: int = DEFAULT_OFFSET,
        updated_after: Optional[DateLike] = None,
        updated_before: Optional[DateLike] = None,
        current_member: bool = True,
    ) -> MembersResponse:
        """
        List members of Congress.

        Args:
            limit: Maximum number of results (default 20).
            offset: Number of results to skip.
            updated_after: Only members updated after this moment (sent as ``fromDateTime``).
            updated_before: Only members updated before this moment (sent as ``toDateTime``).
            current_member: Only currently serving members (default True).
        """
        return self._request("member", {
            "limit": limit,
            "offset": offset,
            "currentMember": current_member,
            "fromDateTime": updated_after,
            "toDateTime": updated_before,
        })

    def get_members_by_congress(
        self,
        congress: int = ACTIVE_CONGRESS,
        *,
        limit: int = DEFAULT_LIMIT,
        offset: int = DEFAULT_OFFSET,
        current_member: bool = True,
    ) -> MembersResponse:
        # congress goes in the path and is repeated as a query parameter
        return self._request(f"member/congress/{congress}", {
            "limit": limit,
            "offset": offset,
            "congress": congress,
            "currentMember": current_member,
        })

    def get_member(self, bioguide_id: str) -> MemberResponse:
        """Full record for one member, looked up by Bioguide ID."""
        return self._request(f"member/{bioguide_id}")

    def get_members_by_state(
        self,
        state: str,
        congress: int = ACTIVE_CONGRESS,
        *,
        current_member: bool = True,
    ) -> MembersResponse:
        """Members for a two-letter state code (e.g. "NY") in one congress."""
        return self._request(f"member/congress/{congress}/{state}", {
            "currentMember": current_member,
        })

    def get_members_by_state_and_district(
        self,
        state: str,
        district: Identifier,
        congress: int = ACTIVE_CONGRESS,
        *,
        current_member: bool = True,
    ) -> MembersResponse:
        return self._request(f"member/congress/{congress}/{state}/{district}", {
            "currentMember": current_member,
        })

    def get_member_sponsored_legislation(
        self,
        bioguide_id: str,
        *,
        limit: int = DEFAULT_LIMIT,
        offset: int = DEFAULT_OFFSET,
    ) -> SponsoredLegislationResponse:
        return self._request(f"member/{bioguide_id}/sponsored-legislation", {
            "limit": limit,
            "offset": offset,
        })

    def get_member_cosponsored_legislation(
        self,
        bioguide_id: str,
        *,
        limit: int = DEFAULT_LIMIT,
        offset: int = DEFAULT_OFFSET,
    ) -> CosponsoredLegislationResponse:
        return self._request(f"member/{bioguide_id}/cosponsored-legislation", {
            "limit": limit,
            "offset": offset,
        })

    # ------------- bills -------------
    def get_bills(
        self,
        congress: Optional[int] = None,
        *,
        limit: int = DEFAULT_LIMIT,
        offset: int = DEFAULT_OFFSET,
        updated_after: Optional[DateLike] = None,
        updated_before: Optional[DateLike] = None,
        sort: BillSort = DEFAULT_BILL_SORT,
    ) -> BillsResponse:
        """
        List bills, newest update first by default.

        Args:
            congress: Restrict to one congress (goes in the path, not the query).
            limit: Maximum number of results (default 20).
            offset: Number of results to skip.
            updated_after: Sent as ``fromDateTime``.
            updated_before: Sent as ``toDateTime``.
            sort: "updateDate+desc" (default) or "updateDate+asc".
        """
        path = join_path("bill", congress)
        return self._request(path, {
            "limit": limit,
            "offset": offset,
            "sort": sort,
            "fromDateTime": updated_after,
            "toDateTime": updated_before,
        })

    def get_bill_details(
        self, bill_type: str, bill_number: Identifier, congress: int = ACTIVE_CONGRESS
    ) -> BillResponse:
        """
        Fetch one bill.

        Args:
            bill_type: Bill type ("hr", "s", "hjres", "sjres", ...), used as given.
            bill_number: Bill number.
            congress: Congress number; defaults to the active congress.
        """
        return self._request(f"bill/{congress}/{bill_type}/{bill_number}")

    def get_subjects_for_bill(
        self, bill_type: str, bill_number: Identifier, congress: int = ACTIVE_CONGRESS
    ) -> SubjectsResponse:
        return self._request(f"bill/{congress}/{bill_type}/{bill_number}/subjects")

    def get_summaries_for_bill(
        self, bill_type: str, bill_number: Identifier, congress: int = ACTIVE_CONGRESS
    ) -> SummariesResponse:
        return self._request(f"bill/{congress}/{bill_type}/{bill_number}/summaries")

    def get_titles_for_bill(
        self, bill_type: str, bill_number: Identifier, congress: int = ACTIVE_CONGRESS
    ) -> TitlesResponse:
        return self._request(f"bill/{congress}/{bill_type}/{bill_number}/titles")

    def get_texts_for_bill(
        self, bill_type: str, bill_number: Identifier, congress: int = ACTIVE_CONGRESS
    ) -> BillTextResponse:
        """Text versions of a bill, each with its available formats (PDF, HTML, XML)."""
        return self._request(f"bill/{congress}/{bill_type}/{bill_number}/text")

    def get_cosponsors_for_bill(
        self, bill_type: str, bill_number: Identifier, congress: int = ACTIVE_CONGRESS
    ) -> CosponsorsResponse:
        return self._request(f"bill/{congress}/{bill_type}/{bill_number}/cosponsors")

    def get_actions_for_bill(
        self, bill_type: str, bill_number: Identifier, congress: int = ACTIVE_CONGRESS
    ) -> ActionsResponse:
        return self._request(f"bill/{congress}/{bill_type}/{bill_number}/actions")

    def get_related_bills(
        self, bill_type: str, bill_number: Identifier, congress: int = ACTIVE_CONGRESS
    ) -> RelatedBillsResponse:
        return self._request(f"bill/{congress}/{bill_type}/{bill_number}/relatedbills")

    def get_committees_for_bill(
        self, bill_type: str, bill_number: Identifier, congress: int = ACTIVE_CONGRESS
    ) -> BillCommitteesResponse:
        return self._request(f"bill/{congress}/{bill_type}/{bill_number}/committees")

    def get_amendments_for_bill(
        self, bill_type: str, bill_number: Identifier, congress: int = ACTIVE_CONGRESS
    ) -> AmendmentsResponse:
        return self._request(f"bill/{congress}/{bill_type}/{bill_number}/amendments")

    # ------------- summaries -------------
    def get_summaries(
        self,
        congress: Optional[int] = None,
        bill_type: Optional[str] = None,
        *,
        from_date_time: Optional[DateLike] = None,
        to_date_time: Optional[DateLike] = None,
        limit: int = DEFAULT_LIMIT,
        offset: int = DEFAULT_OFFSET,
    ) -> SummariesListResponse:
        """Bill summaries; ``bill_type`` only narrows the path when ``congress`` is given."""
        path = join_path("summaries", congress, bill_type) if congress else "summaries"
        return self._request(path, {
            "limit": limit,
            "offset": offset,
            "fromDateTime": from_date_time,
            "toDateTime": to_date_time,
        })

    # ------------- amendments -------------
    def get_amendments(
        self,
        congress: Optional[int] = None,
        amendment_type: Optional[AmendmentType] = None,
        *,
        limit: int = DEFAULT_LIMIT,
        offset: int = DEFAULT_OFFSET,
        updated_after: Optional[DateLike] = None,
    ) -> AmendmentsResponse:
        """
        List amendments.

        ``amendment_type`` is only used together with ``congress`` and goes into
        the path exactly as given.
        """
        path = join_path("amendment", congress, amendment_type) if congress else "amendment"
        return self._request(path, {
            "limit": limit,
            "offset": offset,
            "fromDateTime": updated_after,
        })

    def get_amendment_details(
        self, congress: int, amendment_type: AmendmentType, amendment_number: Identifier
    ) -> AmendmentResponse:
        """Fetch one amendment. The type is lower-cased for the path (HAMDT -> hamdt)."""
        return self._request(f"amendment/{congress}/{amendment_type.lower()}/{amendment_number}")

    def get_amendments_to_amendment(
        self, congress: int, amendment_type: AmendmentType, amendment_number: Identifier
    ) -> AmendmentsResponse:
        return self._request(
            f"amendment/{congress}/{amendment_type.lower()}/{amendment_number}/amendments"
        )

    def get_cosponsors_for_amendment(
        self, congress: int, amendment_type: AmendmentType, amendment_number: Identifier
    ) -> CosponsorsResponse:
        return self._request(
            f"amendment/{congress}/{amendment_type.lower()}/{amendment_number}/cosponsors"
        )

    def get_text_for_amendment(
        self, congress: int, amendment_type: AmendmentType, amendment_number: Identifier
    ) -> BillTextResponse:
        return self._request(f"amendment/{congress}/{amendment_type.lower()}/{amendment_number}/text")

    def get_actions_for_amendment(
        self, congress: int, amendment_type: AmendmentType, amendment_number: Identifier
    ) -> ActionsResponse:
        return self._request(
            f"amendment/{congress}/{amendment_type.lower()}/{amendment_number}/actions"
        )

    # ------------- laws -------------
    def get_laws(self, congress: int = ACTIVE_CONGRESS) -> LawsResponse:
        return self._request(f"law/{congress}")

    # ------------- congressional record -------------
    def get_bound_congressional_record(
        self, year: int, month: Optional[int] = None, day: Optional[int] = None
    ) -> BoundCongressionalRecordResponse:
        """
        Bound Congressional Record for a year, month or single day.

        Raises:
            InvalidParameterError: ``day`` given without ``month``. Raised before
                any request is sent.
        """
        path = f"bound-congressional-record/{year}"
        if month is not None:
            path += f"/{month}"
            if day is not None:
                path += f"/{day}"
        elif day is not None:
            raise InvalidParameterError("Cannot specify day without month")
        return self._request(path)

    def get_daily_congressional_records(
        self, volume_number: Optional[Identifier] = None
    ) -> DailyCongressionalRecordListResponse:
        return self._request(join_path("daily-congressional-record", volume_number))

    def get_daily_congressional_record_issue(
        self, volume_number: Identifier, issue_number: Identifier
    ) -> DailyCongressionalRecordIssueResponse:
        return self._request(f"daily-congressional-record/{volume_number}/{issue_number}")

    def get_daily_congressional_record_articles(
        self, volume_number: Identifier, issue_number: Identifier
    ) -> DailyCongressionalRecordArticlesResponse:
        return self._request(f"daily-congressional-record/{volume_number}/{issue_number}/articles")

    # ------------- CRS reports -------------
    def get_crs_reports(
        self,
        *,
        limit: int = DEFAULT_LIMIT,
        offset: int = DEFAULT_OFFSET,
        updated_after: Optional[DateLike] = None,
    ) -> CRSReportsResponse:
        """Congressional Research Service reports."""
        return self._request("crsreport", {
            "limit": limit,
            "offset": offset,
            "fromDateTime": updated_after,
        })

    def get_crs_report(self, report_number: str) -> CRSReportResponse:
        return self._request(f"crsreport/{report_number}")

    # ------------- committees -------------
    def get_committees(
        self,
        congress: Optional[int] = None,
        chamber: Optional[Chamber] = None,
        *,
        limit: int = DEFAULT_LIMIT,
        offset: int = DEFAULT_OFFSET,
    ) -> CommitteesResponse:
        path = join_path("committee", congress, chamber) if congress else "committee"
        return self._request(path, {"limit": limit, "offset": offset})

    def get_committee(self, chamber: Chamber, system_code: str) -> CommitteeResponse:
        """One committee by chamber and system code (e.g. "house", "hsag00")."""
        return self._request(f"committee/{chamber}/{system_code}")

    def get_committee_nominations(
        self,
        system_code: str,
        *,
        limit: int = DEFAULT_LIMIT,
        offset: int = DEFAULT_OFFSET,
    ) -> CommitteeNominationsResponse:
        # nominations are only referred to Senate committees
        return self._request(f"committee/senate/{system_code}/nominations", {
            "limit": limit,
            "offset": offset,
        })

    def get_committee_house_communications(
        self,
        system_code: str,
        chamber: Literal["house"] = "house",
        *,
        limit: int = DEFAULT_LIMIT,
        offset: int = DEFAULT_OFFSET,
    ) -> HouseCommunicationsResponse:
        return self._request(f"committee/{chamber}/{system_code}/house-communication", {
            "limit": limit,
            "offset": offset,
        })

    def get_committee_senate_communications(
        self,
        system_code: str,
        chamber: Literal["senate"] = "senate",
        *,
        limit: int = DEFAULT_LIMIT,
        offset: int = DEFAULT_OFFSET,
    ) -> SenateCommunicationsResponse:
        return self._request(f"committee/{chamber}/{system_code}/senate-communication", {
            "limit": limit,
            "offset": offset,
        })

    # ------------- committee meetings -------------
    def get_committee_meetings(
        self,
        congress: Optional[int] = None,
        chamber: Optional[Chamber] = None,
        *,
        limit: int = DEFAULT_LIMIT,
        offset: int = DEFAULT_OFFSET,
    ) -> CommitteeMeetingsResponse:
        path = join_path("committee-meeting", congress, chamber) if congress else "committee-meeting"
        return self._request(path, {"limit": limit, "offset": offset})

    def get_committee_meeting(
        self, congress: int, chamber: Chamber, event_id: Identifier
    ) -> CommitteeMeetingResponse:
        return self._request(f"committee-meeting/{congress}/{chamber}/{event_id}")

    # ------------- committee prints -------------
    def get_committee_prints(
        self,
        congress: Optional[int] = None,
        chamber: Optional[Chamber] = None,
        *,
        limit: int = DEFAULT_LIMIT,
        offset: int = DEFAULT_OFFSET,
    ) -> CommitteePrintsResponse:
        path = join_path("committee-print", congress, chamber) if congress else "committee-print"
        return self._request(path, {"limit": limit, "offset": offset})

    def get_committee_print(
        self, congress: int, chamber: Chamber, jacket_number: Identifier
    ) -> CommitteePrintResponse:
        return self._request(f"committee-print/{congress}/{chamber}/{jacket_number}")

    def get_committee_print_text(
        self, congress: int, chamber: Chamber, jacket_number: Identifier
    ) -> CommitteePrintTextResponse:
        return self._request(f"committee-print/{congress}/{chamber}/{jacket_number}/text")

    # ------------- committee reports -------------
    def get_committee_reports(
        self,
        congress: Optional[int] = None,
        report_type: Optional[ReportType] = None,
        *,
        limit: int = DEFAULT_LIMIT,
        offset: int = DEFAULT_OFFSET,
    ) -> CommitteeReportsResponse:
        path = join_path("committee-report", congress, report_type) if congress else "committee-report"
        return self._request(path, {"limit": limit, "offset": offset})

    def get_committee_report(
        self,
        congress: int,
        report_type: ReportType,
        report_number: Identifier,
        part: Optional[int] = None,
    ) -> CommitteeReportResponse:
        """
        One committee report. Reports printed in several parts take ``part``,
        which adds one more path segment.
        """
        path = f"committee-report/{congress}/{report_type}/{report_number}"
        if part:
            path += f"/{part}"
        return self._request(path)

    def get_committee_report_text(
        self,
        congress: int,
        report_type: ReportType,
        report_number: Identifier,
        part: Optional[int] = None,
    ) -> CommitteeReportTextResponse:
        path = f"committee-report/{congress}/{report_type}/{report_number}"
        if part:
            path += f"/{part}"
        return self._request(f"{path}/text")

    # ------------- hearings -------------
    def get_hearings(
        self,
        congress: Optional[int] = None,
        chamber: Optional[Chamber] = None,
        *,
        limit: int = DEFAULT_LIMIT,
        offset: int = DEFAULT_OFFSET,
    ) -> HearingsResponse:
        path = join_path("hearing", congress, chamber) if congress else "hearing"
        return self._request(path, {"limit": limit, "offset": offset})

    def get_hearing(self, congress: int, chamber: Chamber, jacket_number: Identifier) -> HearingResponse:
        return self._request(f"hearing/{congress}/{chamber}/{jacket_number}")

    # ------------- communications -------------
    def get_house_communications(
        self,
        congress: Optional[int] = None,
        communication_type: Optional[HouseCommunicationType] = None,
        *,
        limit: int = DEFAULT_LIMIT,
        offset: int = DEFAULT_OFFSET,
    ) -> HouseCommunicationsResponse:
        path = (join_path("house-communication", congress, communication_type)
                if congress else "house-communication")
        return self._request(path, {"limit": limit, "offset": offset})

    def get_house_communication(
        self, congress: int, communication_type: HouseCommunicationType, number: Identifier
    ) -> HouseCommunicationResponse:
        return self._request(f"house-communication/{congress}/{communication_type}/{number}")

    def get_senate_communications(
        self,
        congress: Optional[int] = None,
        communication_type: Optional[SenateCommunicationType] = None,
        *,
        limit: int = DEFAULT_LIMIT,
        offset: int = DEFAULT_OFFSET,
    ) -> SenateCommunicationsResponse:
        path = (join_path("senate-communication", congress, communication_type)
                if congress else "senate-communication")
        return self._request(path, {"limit": limit, "offset": offset})

    def get_senate_communication(
        self, congress: int, communication_type: SenateCommunicationType, number: Identifier
    ) -> SenateCommunicationResponse:
        return self._request(f"senate-communication/{congress}/{communication_type}/{number}")

    # ------------- house requirements (beta upstream) -------------
    def get_house_requirements(
        self, *, limit: int = DEFAULT_LIMIT, offset: int = DEFAULT_OFFSET
    ) -> HouseRequirementsResponse:
        return self._request("house-requirement", {"limit": limit, "offset": offset})

    def get_house_requirement(self, requirement_number: Identifier) -> HouseRequirementResponse:
        return self._request(f"house-requirement/{requirement_number}")

    def get_house_requirement_matching_communications(
        self,
        requirement_number: Identifier,
        *,
        limit: int = DEFAULT_LIMIT,
        offset: int = DEFAULT_OFFSET,
    ) -> HouseRequirementMatchingCommunicationsResponse:
        """House communications filed against one reporting requirement."""
        return self._request(f"house-requirement/{requirement_number}/matching-communications", {
            "limit": limit,
            "offset": offset,
        })

    # ------------- treaties -------------
    def get_treaties(
        self,
        congress: Optional[int] = None,
        *,
        limit: int = DEFAULT_LIMIT,
        offset: int = DEFAULT_OFFSET,
    ) -> TreatiesResponse:
        return self._request(join_path("treaty", congress), {"limit": limit, "offset": offset})

    def get_treaty(
        self, congress: int, treaty_number: Identifier, treaty_suffix: Optional[str] = None
    ) -> TreatyResponse:
        """One treaty; partitioned treaties take a suffix such as "A"."""
        return self._request(_treaty_path(congress, treaty_number, treaty_suffix))

    def get_treaty_actions(
        self, congress: int, treaty_number: Identifier, treaty_suffix: Optional[str] = None
    ) -> TreatyActionsResponse:
        return self._request(f"{_treaty_path(congress, treaty_number, treaty_suffix)}/actions")

    def get_treaty_committees(
        self, congress: int, treaty_number: Identifier, treaty_suffix: Optional[str] = None
    ) -> TreatyCommitteesResponse:
        return self._request(f"{_treaty_path(congress, treaty_number, treaty_suffix)}/committees")

    # ------------- house roll-call votes (beta upstream) -------------
    def get_house_roll_call_votes(
        self,
        congress: Optional[int] = None,
        session: Optional[int] = None,
        *,
        limit: int = DEFAULT_LIMIT,
        offset: int = DEFAULT_OFFSET,
    ) -> HouseRollCallVotesResponse:
        # every supplied segment keeps its trailing slash: house-vote/119/1/
        path = "house-vote/"
        if congress:
            path += f"{congress}/"
        if session:
            path += f"{session}/"
        return self._request(path, {"limit": limit, "offset": offset})

    def get_house_roll_call_vote(
        self, congress: int, session: int, vote_number: Identifier
    ) -> HouseRollCallResponse:
        return self._request(f"house-vote/{congress}/{session}/{vote_number}")

    def get_house_roll_call_vote_member_votes(
        self, congress: int, session: int, vote_number: Identifier
    ) -> HouseRollCallVoteMemberVotesResponse:
        """How each member voted on one House roll call."""
        return self._request(f"house-vote/{congress}/{session}/{vote_number}/members")
