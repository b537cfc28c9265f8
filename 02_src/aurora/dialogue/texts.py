"""Outbound message texts (WhatsApp markdown)."""

SURVEY_PROMPT = (
    "*Para finalizar, por favor, avalie nosso atendimento. "
    "Digite uma nota de 1 (Ruim) a 5 (Excelente).* ⭐"
)


def greeting(name: str) -> str:
    return (
        f"👋 Olá, *{name}*, Seja Bem-Vindo(a)! 🤖 Sou a *AURORA*, Assistente "
        "Virtual do Setor de Fiscalização Municipal de Posturas. 🔹"
    )


MENU_OPTIONS = (
    "*Selecione uma opção digitando o número:*\n"
    "1️⃣ Fazer Denúncia 🚨\n"
    "2️⃣ Acompanhar Protocolo 📝\n"
    "3️⃣ Comércio Ambulante (RCA) 📄\n"
    "4️⃣ Falar com Atendente 💬"
)


def call_notice(name: str) -> str:
    return (
        f"📞 *Atenção, {name}!* Este é um número de atendimento *Business* e "
        "aceita somente mensagens de texto. Selecione a opção desejada no menu."
    )


INVALID_OPTION = (
    "Opção inválida. ❓ Por favor, digite *menu* ou *voltar* para ver as "
    "opções novamente."
)

COMPLAINT_TYPE_MENU = (
    "Certo. Qual o foco da sua denúncia? 🔎\n\n*Digite o número:* \n"
    "1️⃣ Denunciar lote sujo\n2️⃣ Empresa (Posturas)\n"
    "3️⃣ Ocupação irregular da via\n\n"
    "(Digite *voltar* para retornar ao menu principal.)"
)

INVALID_COMPLAINT_TYPE = (
    "Opção inválida. ⚠️ Por favor, digite *1, 2 ou 3* ou *voltar* para ver "
    "as opções de denúncia."
)

TRACK_PROMPT = (
    "Para acompanhar sua solicitação, por favor, *digite o número do "
    "protocolo* (Ex: 2025.12.08.1.0001). 🔍\n\n"
    "(Digite *voltar* para retornar ao menu principal.)"
)

RCA_CAPTION = (
    "*Segue o RCA (Regulamento de Comércio Ambulante) para sua consulta.* 🛍️"
)
RCA_SENT = (
    "✅ O documento RCA.pdf foi enviado. Digite *menu* ou *voltar* para ver "
    "as opções novamente."
)
RCA_MISSING = (
    "Desculpe, não consegui encontrar o documento *RCA.pdf* na pasta do bot. "
    "😔 Digite *menu* ou *voltar* para ver as opções novamente."
)

HANDOFF_REQUESTED = (
    "Aguarde um momento, por favor. Encaminhando sua conversa para um de "
    "nossos atendentes. 📞 \n\n*Por favor, descreva brevemente sua demanda "
    "para que o atendente possa ajudá-lo(a) melhor.* (Digite *menu* ou "
    "*voltar* para cancelar)."
)

HANDOFF_DESCRIPTION_RECEIVED = (
    "Obrigado! ✅ Sua demanda foi encaminhada ao atendente, que responderá "
    "por aqui em breve. Digite *menu* ou *voltar* para retornar."
)

AUTO_HANDOFF = (
    "Desculpe, não consegui entender o que você precisa. 😥 Para garantir que "
    "você seja atendido(a) corretamente, encaminhei sua conversa para um de "
    "nossos atendentes. 🧑‍💻 \n\n*Em breve um atendente entrará em contato "
    "por aqui.* Se preferir, digite *menu* ou *voltar* para ver as opções."
)


def not_understood(attempt: int, limit: int) -> str:
    return (
        "Desculpe, não entendi. 🤔 Você pode digitar *menu* ou *voltar* para "
        f"ver as opções novamente? (Tentativa {attempt} de {limit} antes do "
        "atendimento humano)."
    )


def lot_address_prompt(label: str) -> str:
    return (
        f"Você escolheu *{label}*. Por favor, envie o *Endereço Completo* do "
        "lote (Rua/Avenida, número, bairro, distrito e local de referência). 📍"
    )


def company_address_prompt(label: str) -> str:
    return (
        f"Você escolheu *{label}*. Por favor, envie o *Endereço Completo* da "
        "empresa (Rua/Avenida, número, bairro e local de referência). 📍"
    )


PHOTO_QUESTION = (
    "✅ Endereço registrado. \nVocê deseja enviar *FOTOS* da ocorrência agora? "
    "(Máximo de 5 imagens)\n*Digite SIM ou NÃO.*"
)
PHOTO_PROMPT = (
    "Certo! Por favor, envie as fotos (até 5) agora. 📸 Quando terminar de "
    "enviar, *digite OK* para prosseguir."
)
INVALID_YES_NO = (
    "Resposta inválida. ❌ Por favor, digite *SIM* ou *NÃO*.\n\n"
    "(Digite *voltar* para retornar ao menu principal.)"
)

COMPANY_NAME_PROMPT = (
    "Endereço registrado. ✅ Agora, por favor, digite o *Nome da Empresa* "
    "denunciada. 🏢"
)
COMPANY_REASON_PROMPT = (
    "✅ Nome da Empresa registrado. Por favor, *descreva o motivo da "
    "denúncia* (o que está irregular). Após descrever, *digite OK* para "
    "gerar o protocolo."
)
COMPANY_REASON_CONTINUE = (
    "Continue descrevendo ou, quando terminar, *digite OK* para gerar o "
    "protocolo."
)


def occupation_registered(protocol: str) -> str:
    return (
        f"Sua denúncia (Protocolo *{protocol}*) foi pré-registrada. ✅ Digite "
        "*menu* ou *voltar* para retornar."
    )


def lot_registered_without_photos(protocol: str) -> str:
    return (
        "Entendido. Sua denúncia foi PRÉ-REGISTRADA. ✅ O seu número de "
        f"*Protocolo é: {protocol}*. Use este número na Opção 2 para "
        f"acompanhamento.\n\n{SURVEY_PROMPT}"
    )


def lot_registered_with_photos(protocol: str) -> str:
    return (
        "Obrigado! Recebemos suas informações e fotos. ✅ O seu número de "
        f"*Protocolo é: {protocol}*.\n\n{SURVEY_PROMPT}"
    )


def company_registered(protocol: str) -> str:
    return (
        "Obrigado! Recebemos sua denúncia. ✅ O seu número de *Protocolo é: "
        f"{protocol}*. Use este número na Opção 2 para acompanhamento.\n\n"
        f"{SURVEY_PROMPT}"
    )


def protocol_found(protocol: str, status: str, details: str) -> str:
    return (
        f"Protocolo *{protocol}* encontrado! ✅ Status atual: *{status}*. "
        f"Detalhes: {details}\n\n{SURVEY_PROMPT}"
    )


PROTOCOL_FORMAT_ERROR = (
    "O formato do protocolo está incorreto. ❌ Por favor, digite no formato "
    "AAAA.MM.DD.T.NNNN (Ex: 2025.12.08.1.0001). Digite *menu* ou *voltar* "
    "para retornar."
)

RATING_THANKS = (
    "Agradecemos a sua avaliação! Seu feedback é muito importante para nós. "
    "🙏 Digite *menu* ou *voltar* para retornar."
)
INVALID_RATING = (
    "Opção inválida. ❗ Por favor, digite uma nota de *1 (Ruim) a 5 "
    "(Excelente)*."
)
