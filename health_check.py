"""
health_check.py - Vérification de santé intégrée à l'application
S'exécute automatiquement au démarrage de Streamlit
"""
import importlib.util
from pathlib import Path
from typing import Dict, List, Tuple

import streamlit as st
import yaml

from src.utils import DEFAULT_SETTINGS


class HealthChecker:
    """Vérifie l'état de l'application au démarrage."""

    def __init__(self, base_dir: str = "."):
        self.base_dir = Path(base_dir)
        self.issues = []
        self.warnings = []
        self.success = []

    def check_all(self) -> Tuple[bool, Dict[str, List[str]]]:
        """Effectue toutes les vérifications."""
        # 1. Créer les dossiers manquants
        self._ensure_directories()

        # 2. Créer le fichier de config par défaut
        self._ensure_config_file()

        # 3. Vérifier les modules Python
        self._check_modules()

        return len(self.issues) == 0, {
            'issues': self.issues,
            'warnings': self.warnings,
            'success': self.success
        }

    def _ensure_directories(self):
        """Crée automatiquement les dossiers nécessaires."""
        for dir_path in ['logs', 'config']:
            (self.base_dir / dir_path).mkdir(parents=True, exist_ok=True)

        self.success.append("✅ Structure des dossiers créée")

    def _ensure_config_file(self):
        """Crée le fichier de configuration par défaut s'il n'existe pas."""
        config_path = self.base_dir / 'config' / 'config.yaml'
        if config_path.exists():
            self.success.append("✅ Configuration trouvée")
            return

        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.safe_dump(DEFAULT_SETTINGS, f, allow_unicode=True, sort_keys=False)

        self.warnings.append("⚠️  Fichier config/config.yaml créé avec config par défaut")

    def _check_modules(self):
        """Vérifie la présence des modules essentiels."""
        missing = [
            module for module in ('streamlit', 'yaml')
            if importlib.util.find_spec(module) is None
        ]

        if missing:
            self.issues.append(f"❌ Modules Python manquants : {', '.join(missing)}")
        else:
            self.success.append("✅ Tous les modules essentiels sont installés")


def display_health_status():
    """Affiche l'état de santé dans Streamlit."""
    if 'health_checked' in st.session_state:
        return

    checker = HealthChecker()
    is_healthy, report = checker.check_all()

    st.session_state.health_checked = True
    st.session_state.health_report = report
    st.session_state.is_healthy = is_healthy

    # Afficher seulement s'il y a des problèmes
    if not is_healthy or report['warnings']:
        with st.sidebar:
            with st.expander("🏥 État de santé", expanded=not is_healthy):
                if report['issues']:
                    st.error("**Problèmes critiques :**")
                    for issue in report['issues']:
                        st.write(issue)

                if report['warnings']:
                    st.warning("**Avertissements :**")
                    for warning in report['warnings']:
                        st.write(warning)


def ensure_app_health(base_dir: str = "."):
    """Vérifie et corrige l'état de l'application au démarrage."""
    checker = HealthChecker(base_dir)
    is_healthy, report = checker.check_all()

    if not is_healthy:
        print("⚠️  PROBLÈMES DÉTECTÉS AU DÉMARRAGE:")
        for issue in report['issues']:
            print(f"   {issue}")

    return is_healthy, report


__all__ = ['HealthChecker', 'display_health_status', 'ensure_app_health']
