#!/usr/bin/env python3
"""
Cadastrar um cartao de fidelidade para um usuario existente.

Uso:
  python scripts/add_loyalty.py --user-id 1 --name "Store" --code 123 [--color "#ff0000"]
"""
from __future__ import annotations

import argparse
import sys

from api.domain.schemas import AddLoyalty
from api.repositories.sql_repository import SQLRepository
from api.services.card_service import LoyaltyService


def main() -> None:
    ap = argparse.ArgumentParser(description="Cadastrar cartao de fidelidade")
    ap.add_argument("--user-id", type=int, required=True, help="ID do dono (deve existir em users)")
    ap.add_argument("--name", required=True, help="Nome da loja")
    ap.add_argument("--code", required=True, help="Codigo do cartao")
    ap.add_argument("--color", help="Cor opcional (#RGB ou #RRGGBB)")
    args = ap.parse_args()

    repo = SQLRepository()
    if not repo.get_user(args.user_id):
        raise SystemExit(f"Usuario '{args.user_id}' nao existe")
    try:
        payload = AddLoyalty(name=args.name.strip(), code=args.code.strip(), color=args.color)
    except ValueError as exc:
        raise SystemExit(f"Dados invalidos: {exc}")

    card = LoyaltyService(repo).create(args.user_id, payload)
    print("OK: cartao cadastrado")
    print(f"  ID: {card['id']}")
    print(f"  Nome: {card['name']}")
    print(f"  Codigo: {card['code']}")
    if card["color"]:
        print(f"  Cor: {card['color']}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - uso CLI
        sys.stderr.write(f"Erro: {exc}\n")
        raise SystemExit(1)
