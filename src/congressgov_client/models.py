"""
Response shapes for the Congress.gov v3 API.

These are annotations only: the client returns the parsed JSON untouched and
never checks it against these declarations. Every shape is ``total=False``
because the API omits keys freely (House-only fields, optional parts, beta
endpoints).
"""
from typing import Any, Dict, List, Optional, TypedDict, Union


# ----------------------------------- shared blocks --------------------------------------#

class PaginationInfo(TypedDict, total=False):
    count: int
    next: str
    prev: str


class CountUrl(TypedDict, total=False):
    count: int
    url: str


class LatestAction(TypedDict, total=False):
    actionDate: str
    text: str
    actionTime: str


class CommitteeRef(TypedDict, total=False):
    url: str
    systemCode: str
    name: str


class BillRef(TypedDict, total=False):
    congress: int
    type: str  # "HR", "S", "HJRES", "SJRES", "HCONRES", "SCONRES", "HRES", "SRES"
    number: str
    url: str


class Activity(TypedDict, total=False):
    name: str
    date: str


class TextFormat(TypedDict, total=False):
    url: str
    type: str  # "Formatted Text", "PDF", "Formatted XML"


class SponsorRef(TypedDict, total=False):
    bioguideId: str
    fullName: str
    firstName: str
    middleName: str
    lastName: str
    party: str
    state: str
    district: int
    url: str
    isByRequest: str  # "Y" or "N"


class RequestInfo(TypedDict, total=False):
    contentType: str
    format: str


# ----------------------------------- congress --------------------------------------#

class CongressSession(TypedDict, total=False):
    chamber: str  # "House of Representatives" or "Senate"
    type: str     # "R" regular, "S" special
    startDate: str
    endDate: str
    number: str


class CongressListItem(TypedDict, total=False):
    name: str
    startYear: str
    endYear: str
    sessions: List[CongressSession]
    url: str


class CongressesResponse(TypedDict, total=False):
    congresses: List[CongressListItem]
    pagination: PaginationInfo


class CongressDetails(CongressListItem, total=False):
    updateDate: str
    number: str


class CongressResponse(TypedDict, total=False):
    congress: CongressDetails
    pagination: PaginationInfo


# ----------------------------------- members --------------------------------------#

class MemberTerm(TypedDict, total=False):
    chamber: str
    congress: int
    district: int
    startYear: int
    endYear: int
    memberType: str
    stateCode: str
    stateName: str


class BaseMember(TypedDict, total=False):
    bioguideId: str
    depiction: Dict[str, str]  # attribution, imageUrl
    district: int
    name: str
    partyName: str
    state: str
    terms: Union[List[MemberTerm], Dict[str, List[MemberTerm]]]  # {"item": [...]} on list payloads
    updateDate: str
    url: str


class MembersResponse(TypedDict, total=False):
    members: List[BaseMember]
    pagination: PaginationInfo


class MemberDetails(BaseMember, total=False):
    addressInformation: Dict[str, Any]
    birthYear: str
    deathYear: str
    sponsoredLegislation: CountUrl
    cosponsoredLegislation: CountUrl
    currentMember: bool
    directOrderName: str
    firstName: str
    honorificName: str
    invertedOrderName: str
    lastName: str
    middleName: str
    officialWebsiteUrl: str
    partyHistory: List[Dict[str, Any]]  # partyAbbreviation, partyName, startYear
    leadership: List[Dict[str, Any]]    # type, congress, current


class MemberResponse(TypedDict, total=False):
    member: MemberDetails


class BaseAmendment(TypedDict, total=False):
    amendmentNumber: str
    congress: int
    introducedDate: str
    latestAction: Optional[LatestAction]
    type: Optional[str]
    url: str


# ----------------------------------- bills --------------------------------------#

class BaseBill(TypedDict, total=False):
    congress: int
    type: str
    originChamber: str      # "House" or "Senate"
    originChamberCode: str  # "H" or "S"
    number: str
    url: str
    title: str
    updateDate: str
    updateDateIncludingText: str
    policyArea: Dict[str, str]
    latestAction: LatestAction


class SponsoredLegislationResponse(TypedDict, total=False):
    sponsoredLegislation: List[Union[BaseBill, BaseAmendment]]
    pagination: PaginationInfo


class CosponsoredLegislationResponse(TypedDict, total=False):
    cosponsoredLegislation: List[Union[BaseBill, BaseAmendment]]
    pagination: PaginationInfo


class BillsResponse(TypedDict, total=False):
    bills: List[BaseBill]
    pagination: PaginationInfo


class BillDetails(BaseBill, total=False):
    introducedDate: str
    constitutionalAuthorityStatementText: str  # House bills and joint resolutions only
    legislationUrl: str
    committees: CountUrl
    committeeReports: List[Dict[str, str]]  # citation, url
    relatedBills: CountUrl
    actions: CountUrl
    sponsors: List[SponsorRef]
    cosponsors: Dict[str, Any]  # count, countIncludingWithdrawnCosponsors, url
    cboCostEstimates: List[Dict[str, str]]
    laws: List[Dict[str, str]]  # type ("Public Law"/"Private Law"), number
    notes: List[Dict[str, str]]
    subjects: CountUrl
    summaries: CountUrl
    titles: CountUrl
    amendments: CountUrl
    textVersions: CountUrl


class BillResponse(TypedDict, total=False):
    bill: BillDetails


class BillCommittee(CommitteeRef, total=False):
    chamber: str  # "House", "Senate" or "Joint"
    type: str
    subcommittees: List[Dict[str, Any]]
    activities: List[Activity]


class BillCommitteesResponse(TypedDict, total=False):
    committees: List[BillCommittee]
    pagination: PaginationInfo


class RelatedBill(BillRef, total=False):
    title: str
    latestAction: LatestAction
    relationshipDetails: List[Dict[str, str]]  # type, identifiedBy


class RelatedBillsResponse(TypedDict, total=False):
    relatedBills: List[RelatedBill]
    pagination: PaginationInfo


class BillAction(TypedDict, total=False):
    actionDate: str
    actionTime: str
    text: str
    type: str
    actionCode: str
    sourceSystem: Dict[str, Any]  # code (0 Senate, 1/2 House, 9 LoC), name
    committees: List[CommitteeRef]
    recordedVotes: List[Dict[str, Any]]
    calendarNumber: Dict[str, str]


class ActionsResponse(TypedDict, total=False):
    actions: List[BillAction]
    pagination: PaginationInfo


class Cosponsor(SponsorRef, total=False):
    sponsorshipDate: str
    isOriginalCosponsor: bool
    sponsorshipWithdrawnDate: str


class CosponsorsResponse(TypedDict, total=False):
    cosponsors: List[Cosponsor]
    pagination: Dict[str, Any]  # count, countIncludingWithdrawnCosponsors, next


class SubjectsResponse(TypedDict, total=False):
    subjects: Dict[str, Any]  # legislativeSubjects: [{name, updateDate}], policyArea: {name, updateDate}
    pagination: PaginationInfo


class BillSummary(TypedDict, total=False):
    versionCode: str
    actionDate: str
    actionDesc: str
    updateDate: str
    text: str  # HTML


class SummariesResponse(TypedDict, total=False):
    summaries: List[BillSummary]
    pagination: PaginationInfo


class BillTitle(TypedDict, total=False):
    titleType: str
    title: str
    chamberCode: str
    chamberName: str
    billTextVersionName: str
    billTextVersionCode: str
    titleTypeCode: str
    updateDate: str


class TitlesResponse(TypedDict, total=False):
    titles: List[BillTitle]
    pagination: PaginationInfo


class BillTextVersion(TypedDict, total=False):
    type: str
    date: Optional[str]
    formats: List[TextFormat]


class BillTextResponse(TypedDict, total=False):
    textVersions: List[BillTextVersion]
    pagination: PaginationInfo


class SummaryListItem(TypedDict, total=False):
    bill: BaseBill
    text: str
    actionDate: str
    updateDate: str
    currentChamber: str
    currentChamberCode: str
    actionDesc: str
    versionCode: str
    lastSummaryUpdateDate: str


class SummariesListResponse(TypedDict, total=False):
    summaries: List[SummaryListItem]
    pagination: PaginationInfo


# ----------------------------------- amendments --------------------------------------#

class AmendmentListItem(TypedDict, total=False):
    congress: int
    number: str
    url: str
    type: str  # "HAMDT", "SAMDT", "SUAMDT"
    description: str  # House amendments only
    purpose: str
    updateDate: str
    latestAction: LatestAction


class AmendmentsResponse(TypedDict, total=False):
    amendments: List[AmendmentListItem]
    pagination: PaginationInfo


class AmendmentDetails(AmendmentListItem, total=False):
    actions: CountUrl
    amendedBill: Dict[str, Any]
    chamber: str
    onBehalfOfSponsor: List[Dict[str, Any]]
    proposedDate: str
    sponsors: List[SponsorRef]
    submittedDate: str
    cosponsors: Dict[str, Any]
    textVersions: CountUrl


class AmendmentResponse(TypedDict, total=False):
    amendment: AmendmentDetails


# ----------------------------------- laws --------------------------------------#

class LawListItem(BaseBill, total=False):
    laws: List[Dict[str, str]]  # number, type


class LawsResponse(TypedDict, total=False):
    bills: List[LawListItem]
    pagination: PaginationInfo


# ----------------------------------- congressional record --------------------------------------#

class BoundCongressionalRecordItem(TypedDict, total=False):
    date: str
    volumeNumber: str
    congress: str
    sessionNumber: str
    updateDate: str
    url: str
    dailyDigest: Dict[str, Any]  # startPage, endPage, text: [{type, url}]
    sections: List[Dict[str, str]]  # name, startPage, endPage


class BoundCongressionalRecordResponse(TypedDict, total=False):
    boundCongressionalRecord: List[BoundCongressionalRecordItem]
    pagination: PaginationInfo


class DailyCongressionalRecordArticle(TypedDict, total=False):
    title: str
    startPage: str
    endPage: str
    text: List[TextFormat]


class DailyCongressionalRecordSection(TypedDict, total=False):
    name: str
    startPage: str
    endPage: str
    text: List[Dict[str, str]]  # part, type, url
    articles: CountUrl


class DailyCongressionalRecordIssueSummary(TypedDict, total=False):
    issueNumber: str
    volumeNumber: int
    issueDate: str
    congress: int
    sessionNumber: int
    url: str
    updateDate: str


class DailyCongressionalRecordIssue(DailyCongressionalRecordIssueSummary, total=False):
    fullIssue: Dict[str, Any]  # entireIssue, sections: [DailyCongressionalRecordSection], articles


class DailyCongressionalRecordListResponse(TypedDict, total=False):
    dailyCongressionalRecord: List[DailyCongressionalRecordIssueSummary]
    pagination: PaginationInfo


class DailyCongressionalRecordIssueResponse(TypedDict, total=False):
    issue: DailyCongressionalRecordIssue


class DailyCongressionalRecordArticlesResponse(TypedDict, total=False):
    articles: Dict[str, Any]  # section: [{name, sectionArticles: [DailyCongressionalRecordArticle]}]
    pagination: PaginationInfo


# ----------------------------------- CRS reports --------------------------------------#

class CRSReportBase(TypedDict, total=False):
    status: str  # "Active" or "Archived"
    id: str      # "R40097", "94-166"
    publishDate: str
    version: int
    contentType: str
    updateDate: str
    title: str
    url: str


class CRSReportDetails(CRSReportBase, total=False):
    authors: List[Dict[str, str]]
    formats: List[Dict[str, str]]  # format, url
    relatedMaterials: List[Dict[str, Any]]
    topics: List[Dict[str, str]]
    summary: str


class CRSReportsResponse(TypedDict, total=False):
    CRSReports: List[CRSReportBase]
    pagination: PaginationInfo


class CRSReportResponse(TypedDict, total=False):
    CRSReport: CRSReportDetails


# ----------------------------------- committees --------------------------------------#

class CommitteeListItem(CommitteeRef, total=False):
    updateDate: str
    parent: CommitteeRef
    subcommittees: List[CommitteeRef]
    chamber: str  # "House", "Senate" or "Joint"
    committeeTypeCode: str


class CommitteesResponse(TypedDict, total=False):
    committees: List[CommitteeListItem]
    pagination: PaginationInfo


class CommitteeDetails(CommitteeListItem, total=False):
    history: List[Dict[str, Any]]  # libraryOfCongressName, officialName, startDate, endDate, ...
    isCurrent: bool
    communications: Any
    nominations: Any
    reports: Any
    bills: Any


class CommitteeResponse(TypedDict, total=False):
    committee: CommitteeDetails


class CommitteeNominationItem(TypedDict, total=False):
    congress: int
    number: str
    partNumber: str
    citation: str
    description: str
    receivedDate: str
    updateDate: str
    url: str
    nominationType: Dict[str, bool]
    latestAction: LatestAction


class CommitteeNominationsResponse(TypedDict, total=False):
    nominations: List[CommitteeNominationItem]
    pagination: PaginationInfo


class CommitteeMeetingListItem(TypedDict, total=False):
    eventId: str
    url: str
    updateDate: str
    congress: int
    chamber: str  # "House", "Senate" or "NoChamber"


class CommitteeMeetingsResponse(TypedDict, total=False):
    committeeMeetings: List[CommitteeMeetingListItem]
    pagination: PaginationInfo


class CommitteeMeetingDetails(CommitteeMeetingListItem, total=False):
    type: str  # "Meeting", "Hearing" or "Markup"
    title: str
    meetingStatus: str
    date: str
    committees: List[CommitteeRef]
    location: Dict[str, Any]
    videos: List[Dict[str, str]]
    witnesses: List[Dict[str, str]]
    witnessDocuments: List[Dict[str, str]]
    meetingDocuments: List[Dict[str, str]]
    hearingTranscript: Any
    relatedItems: Dict[str, Any]  # bills, treaties, nominations


class CommitteeMeetingResponse(TypedDict, total=False):
    committeeMeeting: CommitteeMeetingDetails


class CommitteePrintListItem(TypedDict, total=False):
    jacketNumber: int
    url: str
    updateDate: str
    congress: int
    chamber: str


class CommitteePrintsResponse(TypedDict, total=False):
    committeePrints: List[CommitteePrintListItem]
    pagination: PaginationInfo


class CommitteePrintDetails(CommitteePrintListItem, total=False):
    citation: str
    number: str
    title: str
    committees: List[CommitteeRef]
    associatedBills: List[BillRef]
    text: CountUrl


class CommitteePrintResponse(TypedDict, total=False):
    committeePrint: List[CommitteePrintDetails]  # always a single element
    pagination: PaginationInfo


class CommitteePrintTextResponse(TypedDict, total=False):
    text: List[TextFormat]
    pagination: PaginationInfo


class CommitteeReportListItem(TypedDict, total=False):
    citation: str  # "H. Rept. 117-351"
    url: str
    updateDate: str
    congress: int
    chamber: str
    type: str  # "HRPT", "SRPT", "ERPT"
    number: str
    part: int


class CommitteeReportsResponse(TypedDict, total=False):
    reports: List[CommitteeReportListItem]
    pagination: PaginationInfo


class CommitteeReportDetails(CommitteeReportListItem, total=False):
    committees: List[CommitteeRef]
    sessionNumber: int
    isConferenceReport: bool
    title: str
    issueDate: str
    reportType: str  # "H.Rept", "S.Rept", "Ex.Rept"
    text: CountUrl
    associatedTreaties: List[Dict[str, Any]]
    associatedBills: List[BillRef]


class CommitteeReportResponse(TypedDict, total=False):
    committeeReport: Union[CommitteeReportDetails, List[CommitteeReportDetails]]


class CommitteeReportTextResponse(TypedDict, total=False):
    text: List[Dict[str, Any]]  # formats: [{url, type, isErrata}]
    pagination: PaginationInfo


# ----------------------------------- hearings --------------------------------------#

class HearingListItem(TypedDict, total=False):
    jacketNumber: int
    updateDate: str
    chamber: str
    congress: int
    number: str
    part: str
    url: str


class HearingsResponse(TypedDict, total=False):
    hearings: List[HearingListItem]
    pagination: PaginationInfo


class HearingDetails(TypedDict, total=False):
    jacketNumber: Union[int, str]
    libraryOfCongressIdentifier: str
    number: str
    part: str
    updateDate: str
    congress: int
    title: str
    citation: str
    chamber: str
    committees: List[CommitteeRef]
    dates: List[Dict[str, str]]
    formats: List[TextFormat]
    associatedMeeting: Dict[str, str]


class HearingResponse(TypedDict, total=False):
    hearing: HearingDetails
    request: RequestInfo


# ----------------------------------- communications --------------------------------------#

class CommunicationType(TypedDict, total=False):
    code: str
    name: str


class HouseCommunicationItem(TypedDict, total=False):
    chamber: str
    number: Union[int, str]
    communicationType: CommunicationType
    congress: int
    updateDate: str
    url: str


class HouseCommunicationsResponse(TypedDict, total=False):
    houseCommunications: List[HouseCommunicationItem]
    pagination: PaginationInfo


class HouseCommunicationDetails(HouseCommunicationItem, total=False):
    abstract: str
    congressionalRecordDate: str
    sessionNumber: str
    isRulemaking: str  # "True" or "False"
    committees: List[Dict[str, str]]
    matchingRequirements: List[Dict[str, str]]
    reportNature: str
    submittingAgency: str
    submittingOfficial: str
    legalAuthority: str
    houseDocument: List[Dict[str, str]]


class HouseCommunicationResponse(TypedDict, total=False):
    houseCommunication: HouseCommunicationDetails


class SenateCommunicationListItem(TypedDict, total=False):
    chamber: str
    number: str
    communicationType: CommunicationType
    congress: int
    url: str
    updateDate: str


class SenateCommunicationsResponse(TypedDict, total=False):
    senateCommunications: List[SenateCommunicationListItem]
    pagination: PaginationInfo


class SenateCommunicationDetails(SenateCommunicationListItem, total=False):
    abstract: str
    congressionalRecordDate: str
    committees: List[Dict[str, str]]


class SenateCommunicationResponse(TypedDict, total=False):
    senateCommunication: SenateCommunicationDetails


# ----------------------------------- house requirements --------------------------------------#

class HouseRequirementListItem(TypedDict, total=False):
    number: str
    updateDate: str
    url: str


class HouseRequirementsResponse(TypedDict, total=False):
    houseRequirements: List[HouseRequirementListItem]
    pagination: PaginationInfo


class HouseRequirementDetails(HouseRequirementListItem, total=False):
    parentAgency: str
    frequency: str
    nature: str
    legalAuthority: str
    activeRecord: str  # "True" or "False"
    submittingAgency: str
    submittingOfficial: str
    matchingCommunications: CountUrl


class HouseRequirementResponse(TypedDict, total=False):
    houseRequirement: HouseRequirementDetails
    request: RequestInfo


class HouseRequirementMatchingCommunicationsResponse(TypedDict, total=False):
    matchingCommunications: List[HouseCommunicationItem]
    pagination: PaginationInfo


# ----------------------------------- nominations --------------------------------------#

class NominationListItem(TypedDict, total=False):
    congress: int
    number: str
    partNumber: str
    citation: str
    description: str
    receivedDate: str
    nominationType: Dict[str, bool]  # isCivilian, isMilitary
    latestAction: LatestAction
    updateDate: str
    url: str
    organization: str


class NominationsResponse(TypedDict, total=False):
    nominations: List[NominationListItem]
    pagination: PaginationInfo


class NominationDetails(NominationListItem, total=False):
    isPrivileged: bool
    isList: bool
    nominees: List[Dict[str, Any]]  # introText, nomineeCount, ordinal, organization, positionTitle, url
    committees: CountUrl
    actions: CountUrl
    hearings: CountUrl


class NominationResponse(TypedDict, total=False):
    nomination: NominationDetails


class NomineeItem(TypedDict, total=False):
    ordinal: int
    lastName: str
    firstName: str
    middleName: str
    prefix: str
    suffix: str
    state: str
    effectiveDate: str
    predecessorName: str
    corpsCode: str


class NomineesResponse(TypedDict, total=False):
    nominees: List[NomineeItem]
    pagination: PaginationInfo


class NominationCommitteeItem(CommitteeRef, total=False):
    chamber: str
    type: str
    subcommittees: List[Dict[str, Any]]
    activities: List[Activity]


class NominationCommitteesResponse(TypedDict, total=False):
    committees: List[NominationCommitteeItem]
    pagination: PaginationInfo


class NominationAction(TypedDict, total=False):
    actionDate: str
    text: str
    type: str
    actionCode: str
    committees: List[CommitteeRef]


class NominationActionsResponse(TypedDict, total=False):
    actions: List[NominationAction]
    pagination: PaginationInfo


class NominationHearingItem(TypedDict, total=False):
    chamber: str
    number: int
    partNumber: str
    citation: str
    jacketNumber: int
    errataNumber: int
    date: str


class NominationHearingsResponse(TypedDict, total=False):
    hearings: List[NominationHearingItem]
    pagination: PaginationInfo


# ----------------------------------- treaties --------------------------------------#

class TreatyListItem(TypedDict, total=False):
    congressReceived: int
    congressConsidered: Optional[int]
    number: str
    suffix: str  # part identifier for partitioned treaties ("A", "B", ...)
    transmittedDate: str
    topic: str
    updateDate: str
    parts: Dict[str, Any]  # count, urls


class TreatiesResponse(TypedDict, total=False):
    treaties: List[TreatyListItem]
    pagination: PaginationInfo


class TreatyDetails(TreatyListItem, total=False):
    text: CountUrl
    committees: CountUrl
    actions: CountUrl
    indexTerms: List[Dict[str, str]]
    oldNumber: Optional[str]
    oldNumberDisplayName: Optional[str]
    relatedDocs: List[Dict[str, str]]
    resolutionText: str
    titles: List[Dict[str, str]]


class TreatyResponse(TypedDict, total=False):
    treaty: TreatyDetails


class TreatyAction(TypedDict, total=False):
    type: str
    actionDate: str
    text: str
    actionCode: str
    committee: CommitteeRef


class TreatyActionsResponse(TypedDict, total=False):
    actions: List[TreatyAction]
    pagination: PaginationInfo


class TreatyCommitteeItem(CommitteeRef, total=False):
    chamber: str
    type: str
    activities: List[Activity]


class TreatyCommitteesResponse(TypedDict, total=False):
    committees: List[TreatyCommitteeItem]
    pagination: PaginationInfo


# ----------------------------------- house roll-call votes --------------------------------------#

class HouseRollCallVoteListItem(TypedDict, total=False):
    congress: int
    identifier: int
    legislationNumber: str
    legislationType: str
    legislationUrl: str
    result: str
    rollCallNumber: int
    sessionNumber: int
    sourceDataURL: str
    startDate: str
    updateDate: str
    url: str
    voteType: str


class HouseRollCallVotesResponse(TypedDict, total=False):
    houseRollCallVotes: List[HouseRollCallVoteListItem]
    pagination: PaginationInfo
    request: Dict[str, str]


class VotePartyTotal(TypedDict, total=False):
    nayTotal: int
    notVotingTotal: int
    party: Dict[str, str]
    presentTotal: int
    voteParty: str
    yeaTotal: int


class HouseRollCallVoteDetails(HouseRollCallVoteListItem, total=False):
    votePartyTotal: List[VotePartyTotal]
    voteQuestion: str


class HouseRollCallResponse(TypedDict, total=False):
    houseRollCallVote: HouseRollCallVoteDetails


class MemberVote(TypedDict, total=False):
    bioguideID: str
    firstName: str
    lastName: str
    voteCast: str
    voteParty: str
    voteState: str


class HouseRollCallVoteMemberVotesResponse(TypedDict, total=False):
    houseRollCallVoteMemberVotes: Dict[str, Any]  # congress, identifier, ..., results: [MemberVote]
