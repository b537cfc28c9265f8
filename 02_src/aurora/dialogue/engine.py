"""Dialogue state machine.

The engine maps (session, inbound text) to a Transition: the replacement
session plus a list of effects (texts to send, a document to send,
notifications to dispatch). It never talks to the transport or the
network; the only collaborators it calls are the protocol generator and
the status lookup.
"""

import re
from dataclasses import dataclass, replace
from typing import Callable

from ..logging_config import get_logger
from ..models import (
    AwaitingHandoff,
    Color,
    CompanyAddress,
    CompanyName,
    CompanyReason,
    ComplaintTypeSelect,
    Contact,
    Dispatch,
    LotAddress,
    LotPhotoAsk,
    LotReceivingPhotos,
    NotificationEvent,
    NotificationField,
    SatisfactionSurvey,
    SendDocument,
    SendText,
    Session,
    TrackProtocolInput,
    Transition,
    UnknownAttempts,
)
from ..protocols import IProtocolGenerator, IStatusLookup, is_protocol
from . import texts
from .normalizer import normalize

logger = get_logger(__name__)


GLOBAL_COMMANDS = frozenset(
    {
        "oi",
        "olá",
        "ola",
        "menu",
        "bom dia",
        "boa tarde",
        "boa noite",
        "denunciar",
        "lote",
        "vizinho",
        "voltar",
    }
)

MAX_UNKNOWN_ATTEMPTS = 3
FIELD_VALUE_LIMIT = 1024  # webhook embed field limit

_DIGITS = re.compile(r"[0-9]+")
_RATING = re.compile(r"[1-5]")


@dataclass(frozen=True)
class Turn:
    """One inbound message as seen by the state handlers."""

    normalized: str
    numeric: str
    contact: Contact
    has_media: bool = False


def is_global_command(normalized: str) -> bool:
    return normalized in GLOBAL_COMMANDS


def _clip(value: str, limit: int = FIELD_VALUE_LIMIT) -> str:
    return value if len(value) <= limit else value[: limit - 1] + "…"


def main_menu(contact: Contact) -> list[SendText]:
    return [SendText(texts.greeting(contact.name)), SendText(texts.MENU_OPTIONS)]


class DialogueEngine:
    """Per-user finite-state dialogue for the inspection department."""

    def __init__(
        self,
        protocol_generator: IProtocolGenerator,
        status_lookup: IStatusLookup,
        document_path: str,
    ):
        self._protocols = protocol_generator
        self._statuses = status_lookup
        self._document_path = document_path

        self._handlers: dict[type, Callable[..., Transition]] = {
            UnknownAttempts: self._on_unknown_attempts,
            AwaitingHandoff: self._on_awaiting_handoff,
            ComplaintTypeSelect: self._on_complaint_type,
            LotAddress: self._on_lot_address,
            LotPhotoAsk: self._on_lot_photo_ask,
            LotReceivingPhotos: self._on_lot_receiving_photos,
            CompanyAddress: self._on_company_address,
            CompanyName: self._on_company_name,
            CompanyReason: self._on_company_reason,
            TrackProtocolInput: self._on_track_protocol,
            SatisfactionSurvey: self._on_satisfaction,
        }

    def step(
        self,
        session: Session,
        text: str | None,
        contact: Contact,
        has_media: bool = False,
    ) -> Transition:
        """Advance one user's dialogue by one inbound message."""
        inp = normalize(text)
        turn = Turn(inp.normalized, inp.numeric, contact, has_media)

        if not turn.normalized:
            if has_media and isinstance(session, LotReceivingPhotos):
                return Transition(replace(session, photos=session.photos + 1))
            return Transition(session)

        # Checked before any state so a user can leave a flow at any time.
        if is_global_command(turn.normalized):
            return Transition(None, main_menu(contact))

        if session is None:
            return self._on_idle(turn)

        return self._handlers[type(session)](session, turn)

    def on_call(self, contact: Contact) -> Transition:
        """Voice calls are not supported: explain and show the menu."""
        return Transition(
            None, [SendText(texts.call_notice(contact.name)), *main_menu(contact)]
        )

    # Main menu

    def _on_idle(self, turn: Turn) -> Transition:
        option = turn.numeric
        if option == "1":
            return Transition(ComplaintTypeSelect(), [SendText(texts.COMPLAINT_TYPE_MENU)])
        if option == "2":
            return Transition(TrackProtocolInput(), [SendText(texts.TRACK_PROMPT)])
        if option == "3":
            return Transition(
                None,
                [
                    SendDocument(
                        path=self._document_path,
                        caption=texts.RCA_CAPTION,
                        sent_text=texts.RCA_SENT,
                        fallback_text=texts.RCA_MISSING,
                    )
                ],
            )
        if option == "4":
            event = NotificationEvent(
                title="🟣 SOLICITAÇÃO DE ATENDIMENTO HUMANO (HANDOFF)",
                fields=(
                    NotificationField("Prioridade", "**ATENDIMENTO IMEDIATO**"),
                    NotificationField("Usuário", turn.contact.name, inline=True),
                    NotificationField("Contato WhatsApp", turn.contact.address, inline=True),
                    NotificationField(
                        "Instrução",
                        "O usuário selecionou a opção de atendimento humano.",
                    ),
                ),
                color=Color.HANDOFF,
            )
            return Transition(
                AwaitingHandoff(),
                [Dispatch(event), SendText(texts.HANDOFF_REQUESTED)],
            )
        if _DIGITS.fullmatch(option):
            return Transition(None, [SendText(texts.INVALID_OPTION)])
        return self._fallback(0, turn)

    def _on_unknown_attempts(self, session: UnknownAttempts, turn: Turn) -> Transition:
        return self._fallback(session.count, turn)

    def _fallback(self, previous: int, turn: Turn) -> Transition:
        count = previous + 1
        if count < MAX_UNKNOWN_ATTEMPTS:
            return Transition(
                UnknownAttempts(count),
                [SendText(texts.not_understood(count, MAX_UNKNOWN_ATTEMPTS))],
            )

        logger.info("Auto handoff for %s after %s unrecognised inputs", turn.contact.address, count)
        event = NotificationEvent(
            title="🟣 HANDOFF AUTOMÁTICO POR FALHA DE COMPREENSÃO",
            fields=(
                NotificationField("Prioridade", "**HANDOFF AUTOMÁTICO**"),
                NotificationField("Usuário", turn.contact.name, inline=True),
                NotificationField("Contato WhatsApp", turn.contact.address, inline=True),
                NotificationField(
                    "Motivo",
                    f"O usuário excedeu {MAX_UNKNOWN_ATTEMPTS} tentativas de "
                    "entrada inválida no menu principal.",
                ),
            ),
            color=Color.HANDOFF,
        )
        return Transition(None, [Dispatch(event), SendText(texts.AUTO_HANDOFF)])

    def _on_awaiting_handoff(self, session: AwaitingHandoff, turn: Turn) -> Transition:
        event = NotificationEvent(
            title="🟣 DESCRIÇÃO DA DEMANDA (HANDOFF)",
            fields=(
                NotificationField("Usuário", turn.contact.name, inline=True),
                NotificationField("Contato WhatsApp", turn.contact.address, inline=True),
                NotificationField("Descrição", _clip(turn.numeric)),
            ),
            color=Color.HANDOFF,
        )
        return Transition(
            None, [Dispatch(event), SendText(texts.HANDOFF_DESCRIPTION_RECEIVED)]
        )

    # Complaint flows

    def _on_complaint_type(self, session: ComplaintTypeSelect, turn: Turn) -> Transition:
        if turn.numeric == "1":
            return Transition(
                LotAddress(), [SendText(texts.lot_address_prompt("Lote Sujo"))]
            )
        if turn.numeric == "2":
            return Transition(
                CompanyAddress(),
                [SendText(texts.company_address_prompt("Empresa (Posturas)"))],
            )
        if turn.numeric == "3":
            label = "Ocupação Irregular da Via"
            protocol = self._protocols.generate("ocupacao_irregular")
            event = NotificationEvent(
                title=f"🚨 NOVA DENÚNCIA: {label.upper()}",
                fields=(
                    NotificationField("Protocolo", protocol, inline=True),
                    NotificationField("Tipo", label, inline=True),
                    NotificationField("Ação", "Usuário redirecionado para Formulário Oficial"),
                    NotificationField("Contato", turn.contact.address),
                ),
                color=Color.COMPLAINT,
            )
            return Transition(
                None,
                [Dispatch(event), SendText(texts.occupation_registered(protocol))],
                protocol=protocol,
            )
        return Transition(session, [SendText(texts.INVALID_COMPLAINT_TYPE)])

    def _on_lot_address(self, session: LotAddress, turn: Turn) -> Transition:
        return Transition(
            LotPhotoAsk(address=turn.numeric), [SendText(texts.PHOTO_QUESTION)]
        )

    def _on_lot_photo_ask(self, session: LotPhotoAsk, turn: Turn) -> Transition:
        if turn.normalized == "sim":
            return Transition(
                LotReceivingPhotos(address=session.address),
                [SendText(texts.PHOTO_PROMPT)],
            )
        if turn.normalized in ("não", "nao"):
            return self._register_lot(session.address, None, turn)
        return Transition(session, [SendText(texts.INVALID_YES_NO)])

    def _on_lot_receiving_photos(
        self, session: LotReceivingPhotos, turn: Turn
    ) -> Transition:
        photos = session.photos + 1 if turn.has_media else session.photos
        if turn.normalized == "ok":
            return self._register_lot(session.address, photos, turn)
        # Photos and captions are absorbed silently until "ok".
        return Transition(replace(session, photos=photos))

    def _register_lot(self, address: str, photos: int | None, turn: Turn) -> Transition:
        protocol = self._protocols.generate("lote_sujo")
        if photos is None:
            title = "🚨 NOVA DENÚNCIA DE LOTE SUJO (SEM FOTOS)"
            photo_value = "Nenhuma foto enviada"
            reply = texts.lot_registered_without_photos(protocol)
        else:
            title = "🚨 NOVA DENÚNCIA DE LOTE SUJO (COM FOTOS)"
            photo_value = (
                f"{photos} imagem(ns) recebida(s) via Chatbot"
                if photos
                else "Recebidas via Chatbot (Verifique logs/servidor)"
            )
            reply = texts.lot_registered_with_photos(protocol)

        event = NotificationEvent(
            title=title,
            fields=(
                NotificationField("Protocolo", protocol, inline=True),
                NotificationField("Tipo", "Lote Sujo", inline=True),
                NotificationField("Endereço", _clip(address) or "Não fornecido"),
                NotificationField("Fotos", photo_value, inline=True),
                NotificationField("Contato", turn.contact.address),
            ),
            color=Color.COMPLAINT,
        )
        return Transition(
            SatisfactionSurvey(flow="denuncia", protocol=protocol),
            [Dispatch(event), SendText(reply)],
            protocol=protocol,
        )

    def _on_company_address(self, session: CompanyAddress, turn: Turn) -> Transition:
        return Transition(
            CompanyName(address=turn.numeric), [SendText(texts.COMPANY_NAME_PROMPT)]
        )

    def _on_company_name(self, session: CompanyName, turn: Turn) -> Transition:
        return Transition(
            CompanyReason(address=session.address, company_name=turn.numeric),
            [SendText(texts.COMPANY_REASON_PROMPT)],
        )

    def _on_company_reason(self, session: CompanyReason, turn: Turn) -> Transition:
        if turn.normalized != "ok":
            return Transition(
                replace(session, reason_lines=session.reason_lines + (turn.numeric,)),
                [SendText(texts.COMPANY_REASON_CONTINUE)],
            )

        protocol = self._protocols.generate("empresa")
        reason = "\n".join(session.reason_lines)
        event = NotificationEvent(
            title="🚨 NOVA DENÚNCIA: EMPRESA (POSTURAS)",
            fields=(
                NotificationField("Protocolo", protocol, inline=True),
                NotificationField("Tipo", "Empresa (Posturas)", inline=True),
                NotificationField("Nome Empresa", _clip(session.company_name) or "Não fornecido"),
                NotificationField("Endereço", _clip(session.address) or "Não fornecido"),
                NotificationField("Motivo da Denúncia", _clip(reason) or "Não informado"),
                NotificationField("Contato", turn.contact.address),
            ),
            color=Color.COMPLAINT,
        )
        return Transition(
            SatisfactionSurvey(flow="denuncia", protocol=protocol),
            [Dispatch(event), SendText(texts.company_registered(protocol))],
            protocol=protocol,
        )

    # Tracking and survey

    def _on_track_protocol(self, session: TrackProtocolInput, turn: Turn) -> Transition:
        if not is_protocol(turn.numeric):
            return Transition(None, [SendText(texts.PROTOCOL_FORMAT_ERROR)])

        protocol = turn.numeric
        found = self._statuses.lookup(protocol)
        return Transition(
            SatisfactionSurvey(flow="acompanhamento", protocol=protocol),
            [SendText(texts.protocol_found(protocol, found.status, found.details))],
        )

    def _on_satisfaction(self, session: SatisfactionSurvey, turn: Turn) -> Transition:
        if not _RATING.fullmatch(turn.numeric):
            return Transition(session, [SendText(texts.INVALID_RATING)])

        rating = int(turn.numeric)
        event = NotificationEvent(
            title="📊 PESQUISA DE SATISFAÇÃO RECEBIDA",
            fields=(
                NotificationField("Nota Atribuída", f"**{rating} / 5**", inline=True),
                NotificationField("Tipo de Fluxo", session.flow or "Geral", inline=True),
                NotificationField("Protocolo Relacionado", session.protocol or "N/A"),
                NotificationField("Contato", turn.contact.address),
            ),
            color=Color.RATING_LOW if rating <= 2 else Color.RATING_OK,
        )
        return Transition(None, [Dispatch(event), SendText(texts.RATING_THANKS)])
